"""
Declarations

The author-facing declaration API. Each registration function returns an
immutable declaration object; assigning it to a class attribute of a BasePage
subclass names it and registers it when the class is created.

Example:
    class SearchPage(BasePage):
        url = direct_url("https://www.google.com")
        title = expected_title("Google")
        ready = expected_element("text_field", name="q", timeout=10)

        search_box = text_field(name="q")
        search = button(name="btnG")
"""

import re
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Pattern, Union

from ..errors import InvalidDeclaration
from .kinds import ElementKind, coerce_kind

Identifier = Mapping[str, Any]
Resolver = Callable[[Any], Any]
Locator = Union[Identifier, Resolver]


@dataclass(frozen=True, eq=False)
class ElementDeclaration:
    """One named, kind-tagged element binding."""
    kind: ElementKind
    locator: Locator
    name: Optional[str] = None
    parent: Optional[str] = None  # name of the declaration whose handle scopes the lookup
    timeout: Optional[int] = None  # presence gates only

    @property
    def uses_resolver(self) -> bool:
        return callable(self.locator)

    def named(self, name: str) -> "ElementDeclaration":
        return replace(self, name=name)

    def describe(self) -> str:
        """Readable locator description used in logs and error messages."""
        if self.uses_resolver:
            target = f"<resolver {getattr(self.locator, '__name__', 'callable')}>"
        else:
            target = repr(dict(self.locator))
        scope = f" within {self.parent}" if self.parent else ""
        return f"{self.kind.value} {target}{scope}"


@dataclass(frozen=True)
class LiteralTitle:
    text: str

    def matches(self, actual: Optional[str]) -> bool:
        return actual == self.text

    def describe(self) -> str:
        return self.text


@dataclass(frozen=True)
class PatternTitle:
    pattern: Pattern

    def matches(self, actual: Optional[str]) -> bool:
        return actual is not None and self.pattern.search(actual) is not None

    def describe(self) -> str:
        return self.pattern.pattern


TitleRule = Union[LiteralTitle, PatternTitle]


@dataclass(frozen=True)
class DirectUrl:
    url: str


@dataclass(frozen=True)
class PresenceGate:
    """The element a page waits for before it is considered loaded."""
    declaration: ElementDeclaration


# ==================== Page Rules ====================

def direct_url(url: str) -> DirectUrl:
    """
    Declare the URL a page navigates to with goto() or when visited.

    Example:
        url = direct_url("https://www.google.com")
    """
    if not isinstance(url, str) or not url:
        raise InvalidDeclaration(f"direct_url needs a non-empty string, got {url!r}")
    return DirectUrl(url)


def expected_title(rule: Union[str, Pattern]) -> TitleRule:
    """
    Declare the title a page must have once loaded.

    A string must match exactly; a compiled pattern is searched for.
    """
    if isinstance(rule, str):
        return LiteralTitle(rule)
    if isinstance(rule, re.Pattern):
        return PatternTitle(rule)
    raise InvalidDeclaration(f"expected_title needs a string or compiled pattern, got {rule!r}")


def expected_element(
    kind: Union[str, ElementKind],
    locator: Optional[Identifier] = None,
    timeout: Optional[int] = None,
    **identifier
) -> PresenceGate:
    """
    Declare an element that must be present before the page is ready.

    Args:
        kind: Element kind to wait for
        locator: Identifier mapping (keywords work too)
        timeout: Seconds to wait; defaults to the configured presence_timeout

    Example:
        ready = expected_element("text_field", {"name": "firstname"}, 10)
    """
    if callable(locator):
        raise InvalidDeclaration("expected_element does not accept resolver functions")
    if timeout is not None and timeout <= 0:
        raise InvalidDeclaration(f"expected_element timeout must be positive, got {timeout}")
    declaration = _declare(coerce_kind(kind), locator, None, identifier)
    return PresenceGate(replace(declaration, name="expected_element", timeout=timeout))


# ==================== Element Declarations ====================

def _declare(
    kind: ElementKind,
    locator: Optional[Locator],
    parent: Optional[str],
    identifier: Mapping[str, Any]
) -> ElementDeclaration:
    if parent is not None and not isinstance(parent, str):
        raise InvalidDeclaration(f"parent must be the name of a declaration, got {parent!r}")

    if callable(locator):
        if identifier:
            raise InvalidDeclaration(
                f"{kind.value}: a resolver function and identifier keywords are mutually exclusive"
            )
        return ElementDeclaration(kind=kind, locator=locator, parent=parent)

    if locator is None:
        attributes = dict(identifier)
    elif isinstance(locator, Mapping):
        attributes = {**locator, **identifier}
    else:
        raise InvalidDeclaration(
            f"{kind.value}: locator must be a mapping or a callable, got {type(locator).__name__}"
        )
    return ElementDeclaration(kind=kind, locator=MappingProxyType(attributes), parent=parent)


def text_field(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """
    Declare a text field.

    Generates N() / N(value) to read and set the value, and N_handle().

    Example:
        first_name = text_field(name="firstname")
        page.first_name("Finley")
        page.first_name()  # "Finley"
    """
    return _declare(ElementKind.TEXT_FIELD, locator, parent, identifier)


def select_list(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """
    Declare a select list.

    Generates N() / N(value) to read and change the selection,
    N_selected(value) and N_handle().
    """
    return _declare(ElementKind.SELECT_LIST, locator, parent, identifier)


def checkbox(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """
    Declare a checkbox.

    Generates check_N(), uncheck_N(), N_checked() and N_handle().
    """
    return _declare(ElementKind.CHECKBOX, locator, parent, identifier)


def radio_button(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare a radio button: select_N(), N_selected() and N_handle()."""
    return _declare(ElementKind.RADIO_BUTTON, locator, parent, identifier)


def button(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare a button: N() clicks it, N_handle() returns it."""
    return _declare(ElementKind.BUTTON, locator, parent, identifier)


def link(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare a link: N() clicks it, N_handle() returns it."""
    return _declare(ElementKind.LINK, locator, parent, identifier)


def table(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare a table. Both N() and N_handle() return the table element."""
    return _declare(ElementKind.TABLE, locator, parent, identifier)


def row(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """
    Declare a table row: N() returns its text, N_row() the row element.

    Rows are usually scoped to a table declared earlier:
        results = table(id="results")
        first_result = row(parent="results")
    """
    return _declare(ElementKind.ROW, locator, parent, identifier)


def cell(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare a table cell: N() returns its text, N_cell() the cell element."""
    return _declare(ElementKind.CELL, locator, parent, identifier)


def image(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
    """Declare an image. Only N_handle() is generated."""
    return _declare(ElementKind.IMAGE, locator, parent, identifier)


def _text_registration(kind: ElementKind) -> Callable[..., ElementDeclaration]:
    def register(locator: Optional[Locator] = None, *, parent: Optional[str] = None, **identifier) -> ElementDeclaration:
        return _declare(kind, locator, parent, identifier)

    register.__name__ = register.__qualname__ = kind.value
    register.__doc__ = f"Declare a <{kind.value}>: N() returns its text, N_handle() the element."
    return register


div = _text_registration(ElementKind.DIV)
span = _text_registration(ElementKind.SPAN)
p = _text_registration(ElementKind.PARAGRAPH)
li = _text_registration(ElementKind.LIST_ITEM)
h1 = _text_registration(ElementKind.H1)
h2 = _text_registration(ElementKind.H2)
h3 = _text_registration(ElementKind.H3)
h4 = _text_registration(ElementKind.H4)
h5 = _text_registration(ElementKind.H5)
h6 = _text_registration(ElementKind.H6)
dl = _text_registration(ElementKind.DEFINITION_LIST)
dt = _text_registration(ElementKind.TERM)
dd = _text_registration(ElementKind.DATA)
form = _text_registration(ElementKind.FORM)
frame = _text_registration(ElementKind.FRAME)
