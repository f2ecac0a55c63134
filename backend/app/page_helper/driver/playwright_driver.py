"""
Playwright Driver

Implements the driver contract on top of Playwright's synchronous API.
The caller owns the browser, context and page; this adapter only borrows
an open Page.

Identifier translation:
- every kind maps to a CSS base selector (text_field -> text-like inputs and textarea)
- id, name, value, href, title and any other key become attribute selectors
- "class" matches one class name, "css" is appended raw
- "xpath" replaces the kind selector entirely
- "text" filters on exact text (or a compiled pattern)
- "index" picks the nth match, otherwise the first match is used
"""

import re
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..core.kinds import ElementKind
from .contract import BrowserDriver, ElementHandle

logger = logging.getLogger(__name__)


KIND_SELECTORS: Dict[ElementKind, Tuple[str, ...]] = {
    ElementKind.TEXT_FIELD: (
        "input:not([type])",
        'input[type="text"]',
        'input[type="password"]',
        'input[type="email"]',
        'input[type="search"]',
        'input[type="tel"]',
        'input[type="url"]',
        'input[type="number"]',
        "textarea",
    ),
    ElementKind.SELECT_LIST: ("select",),
    ElementKind.CHECKBOX: ('input[type="checkbox"]',),
    ElementKind.RADIO_BUTTON: ('input[type="radio"]',),
    ElementKind.BUTTON: (
        "button",
        'input[type="submit"]',
        'input[type="button"]',
        'input[type="reset"]',
        'input[type="image"]',
    ),
    ElementKind.LINK: ("a",),
    ElementKind.TABLE: ("table",),
    ElementKind.ROW: ("tr",),
    ElementKind.CELL: ("td", "th"),
    ElementKind.DIV: ("div",),
    ElementKind.SPAN: ("span",),
    ElementKind.PARAGRAPH: ("p",),
    ElementKind.LIST_ITEM: ("li",),
    ElementKind.H1: ("h1",),
    ElementKind.H2: ("h2",),
    ElementKind.H3: ("h3",),
    ElementKind.H4: ("h4",),
    ElementKind.H5: ("h5",),
    ElementKind.H6: ("h6",),
    ElementKind.DEFINITION_LIST: ("dl",),
    ElementKind.TERM: ("dt",),
    ElementKind.DATA: ("dd",),
    ElementKind.FORM: ("form",),
    ElementKind.FRAME: ("frame", "iframe"),
    ElementKind.IMAGE: ("img",),
}

# Identifier keys that are not plain attribute matches
_SPECIAL_KEYS = {"text", "index", "css", "xpath"}


def _quote(value: Any) -> str:
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def build_selector(kind: ElementKind, identifier: Mapping[str, Any]) -> str:
    """Build the Playwright selector string for a kind and identifier."""
    xpath = identifier.get("xpath")
    if xpath is not None:
        extra = set(identifier) - {"xpath", "text", "index"}
        if extra:
            raise ValueError(f"xpath cannot be combined with {sorted(extra)}")
        return f"xpath={xpath}"

    attributes = []
    for key, value in identifier.items():
        if key in _SPECIAL_KEYS:
            continue
        if key == "class":
            attributes.append(f'[class~="{_quote(value)}"]')
        else:
            attributes.append(f'[{key.replace("_", "-")}="{_quote(value)}"]')

    suffix = "".join(attributes) + identifier.get("css", "")
    return ", ".join(base + suffix for base in KIND_SELECTORS[kind])


def _text_pattern(text: Union[str, re.Pattern]) -> re.Pattern:
    if isinstance(text, re.Pattern):
        return text
    return re.compile(r"^\s*" + re.escape(text) + r"\s*$")


def build_locator(scope, kind: ElementKind, identifier: Mapping[str, Any]) -> Locator:
    """
    Locate the first element of a kind in a Page or parent Locator.

    Ambiguous identifiers are not an error: the first match wins unless an
    index is given.
    """
    locator = scope.locator(build_selector(kind, identifier))

    text = identifier.get("text")
    if text is not None:
        locator = locator.filter(has_text=_text_pattern(text))

    index = identifier.get("index")
    if index is not None:
        return locator.nth(int(index))
    return locator.first


class PlaywrightElement(ElementHandle):
    """An element handle backed by a Playwright Locator."""

    def __init__(self, locator: Locator, kind: ElementKind):
        self.locator = locator
        self.kind = kind

    def __repr__(self) -> str:
        return f"PlaywrightElement({self.kind.value}, {self.locator!r})"

    def find_element(self, kind: ElementKind, identifier: Mapping[str, Any]) -> "PlaywrightElement":
        return PlaywrightElement(build_locator(self.locator, kind, identifier), kind)

    def exists(self) -> bool:
        return self.locator.count() > 0

    def text(self) -> str:
        if self.kind == ElementKind.ROW:
            # Cell texts joined by single spaces, not the tab-separated innerText of <tr>
            cells = self.locator.locator("td, th").all()
            return " ".join(c.inner_text().strip() for c in cells)
        if self.kind == ElementKind.FRAME:
            return self.locator.content_frame.locator("body").inner_text()
        return self.locator.inner_text()

    def click(self) -> None:
        self.locator.click()

    def get_value(self) -> str:
        return self.locator.input_value()

    def set_value(self, value: Any) -> None:
        self.locator.fill(str(value))

    def is_checked(self) -> bool:
        return self.locator.is_checked()

    def set_checked(self) -> None:
        self.locator.check()

    def clear_checked(self) -> None:
        self.locator.uncheck()

    def is_selected(self, value: Optional[Any] = None) -> bool:
        if value is None:
            return self.locator.is_checked()
        selected: List[str] = self.locator.evaluate(
            "el => Array.from(el.selectedOptions).flatMap(o => [o.value, o.text])"
        )
        return str(value) in selected

    def select(self, value: Optional[Any] = None) -> None:
        if value is None:
            self.locator.check()
        else:
            # Playwright matches the string against option values and labels
            self.locator.select_option(str(value))

    def wait_until_present(self, timeout: float, interval: float = 0.1) -> bool:
        try:
            self.locator.wait_for(state="attached", timeout=timeout * 1000)
            return True
        except PlaywrightTimeoutError:
            return False


class PlaywrightDriver(BrowserDriver):
    """
    Browser driver backed by a Playwright sync Page.

    Example:
        with sync_playwright() as p:
            browser = p.chromium.launch()
            driver = PlaywrightDriver(browser.new_page())
            page = SearchPage(driver, visit=True)
    """

    def __init__(self, page: Page):
        self.page = page

    def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        self.page.goto(url)

    def current_title(self) -> str:
        return self.page.title()

    def current_url(self) -> str:
        return self.page.url

    def find_element(self, kind: ElementKind, identifier: Mapping[str, Any]) -> PlaywrightElement:
        return PlaywrightElement(build_locator(self.page, kind, identifier), kind)

    def invoke(self, operation: str, *args, **kwargs) -> Any:
        """
        Call a public member of the Playwright Page.

        Methods are called with the given arguments; plain attributes
        (page.url, page.keyboard) are returned when no arguments are given.
        """
        if operation.startswith("_"):
            raise AttributeError(f"Refusing to forward private member '{operation}'")

        target = getattr(self.page, operation)
        if callable(target):
            return target(*args, **kwargs)
        if args or kwargs:
            raise TypeError(f"Page.{operation} is not callable")
        return target
