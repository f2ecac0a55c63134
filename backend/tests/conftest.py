"""
Pytest configuration and shared fixtures for Page Helper tests.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock, MagicMock
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

# Add backend app to path
sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from page_helper.config import PageHelperConfig, reset_config
from page_helper.core.kinds import ElementKind, coerce_kind
from page_helper.driver.contract import BrowserDriver, ElementHandle


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _key(kind, identifier: Optional[Mapping[str, Any]]) -> Tuple:
    items = sorted((k, str(v)) for k, v in (identifier or {}).items())
    return coerce_kind(kind), tuple(items)


# ==================== In-Memory Driver ====================

class FakeElement(ElementHandle):
    """
    Stateful element double. Children are registered with add() and found by
    exact (kind, identifier) match; unknown lookups return a missing element.
    """

    def __init__(
        self,
        kind=None,
        text: Optional[str] = None,
        value: Any = "",
        checked: bool = False,
        options: Optional[List[str]] = None,
        present: bool = True,
        appear_after: Optional[int] = None
    ):
        self.kind = coerce_kind(kind) if kind is not None else None
        self.text_content = text
        self.value = value
        self.checked = checked
        self.options = options
        self.present = present
        self.appear_after = appear_after
        self.children: Dict[Tuple, "FakeElement"] = {}
        self.clicks = 0
        self.probes = 0

    def add(self, kind, identifier: Optional[Mapping[str, Any]] = None, **state) -> "FakeElement":
        child = FakeElement(kind, **state)
        self.children[_key(kind, identifier)] = child
        return child

    def find_element(self, kind: ElementKind, identifier: Mapping[str, Any]) -> "FakeElement":
        found = self.children.get(_key(kind, identifier))
        return found if found is not None else FakeElement(kind, present=False)

    def exists(self) -> bool:
        self.probes += 1
        if self.appear_after is not None:
            return self.probes > self.appear_after
        return self.present

    def text(self) -> str:
        if self.text_content is None:
            return " ".join(child.text() for child in self.children.values())
        return self.text_content

    def click(self) -> None:
        self.clicks += 1

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        self.value = value

    def is_checked(self) -> bool:
        return self.checked

    def set_checked(self) -> None:
        self.checked = True

    def clear_checked(self) -> None:
        self.checked = False

    def is_selected(self, value: Optional[Any] = None) -> bool:
        if value is None:
            return self.checked
        return self.value == value

    def select(self, value: Optional[Any] = None) -> None:
        if value is None:
            self.checked = True
            return
        if self.options is not None and value not in self.options:
            raise ValueError(f"Option {value!r} not in {self.options}")
        self.value = value


class FakeDriver(BrowserDriver):
    """In-memory browser session implementing the driver contract."""

    def __init__(self, title: str = "HTML Document Title", url: str = "about:blank"):
        self.title = title
        self.url = url
        self.root = FakeElement()
        self.visited: List[str] = []
        self.lookups = 0
        self.operations: Dict[str, Callable] = {}
        self.invocations: List[Tuple[str, tuple, dict]] = []

    def add(self, kind, identifier: Optional[Mapping[str, Any]] = None, **state) -> FakeElement:
        return self.root.add(kind, identifier, **state)

    def navigate(self, url: str) -> None:
        self.visited.append(url)
        self.url = url

    def current_title(self) -> str:
        return self.title

    def current_url(self) -> str:
        return self.url

    def find_element(self, kind: ElementKind, identifier: Mapping[str, Any]) -> FakeElement:
        self.lookups += 1
        return self.root.find_element(kind, identifier)

    def invoke(self, operation: str, *args, **kwargs) -> Any:
        self.invocations.append((operation, args, kwargs))
        handler = self.operations.get(operation)
        if handler is None:
            raise AttributeError(f"FakeDriver has no operation '{operation}'")
        return handler(*args, **kwargs)


# ==================== Fixtures ====================

@pytest.fixture(autouse=True)
def isolated_config():
    """Make sure no test sees global config set by another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fast_config():
    """Config with a short poll interval so presence tests run quickly."""
    return PageHelperConfig(poll_interval=0.01)


@pytest.fixture
def fake_driver():
    """An empty in-memory browser session titled 'HTML Document Title'."""
    return FakeDriver()


@pytest.fixture
def fixture_driver(fake_driver):
    """An in-memory session holding the elements of fixtures/test.html."""
    driver = fake_driver
    driver.add("text_field", {"name": "firstname"})
    driver.add("text_field", {"name": "lastname"})
    driver.add("select_list", {"name": "cars"}, value="Honda", options=["Honda", "Mazda", "Toyota"])
    driver.add("checkbox", {"name": "agree"})
    driver.add("radio_button", {"value": "High"})
    driver.add("radio_button", {"value": "Medium"})
    driver.add("radio_button", {"value": "Low"})
    driver.add("button", {"value": "Submit"})
    driver.add("link", {"text": "Information Link"})

    test_table = driver.add("table", {"id": "myTable"})
    table_row = test_table.add("row")
    table_row.add("cell", text="Test Table Col 1")
    table_row.add("cell", {"index": 1}, text="Test Table Col 2")

    driver.add("div", {"id": "myDiv"}, text="This is a header\n\nThis is a paragraph.")
    driver.add("span", {"id": "mySpan"}, text="Some background text in a span.")
    driver.add("p", {"id": "myP"}, text="This is a paragraph.")

    definition_list = driver.add("dl", {"id": "myDl"}, text="Succulents\n\n- water-retaining plants.")
    definition_list.add("dt", text="Succulents")
    definition_list.add("dd", text="- water-retaining plants.")

    driver.add("form", {"name": "myForm"}, text="First name:\nLast name:")
    driver.add("image", {"id": "myImage"})
    driver.add("frame", {"id": "myFrame"}, text="Framed content")
    driver.add("li", {"id": "blueLi"}, text="Blue")
    for level, word in enumerate(["One", "Two", "Three", "Four", "Five", "Six"], start=1):
        driver.add(f"h{level}", {"id": f"myh{level}"}, text=f"Heading {word}")
    return driver


# ==================== Mock Playwright Page Fixture ====================

@pytest.fixture
def mock_locator():
    """Create a mock Playwright sync Locator. Chained lookups return itself."""
    locator = MagicMock()

    locator.locator = Mock(return_value=locator)
    locator.filter = Mock(return_value=locator)
    locator.nth = Mock(return_value=locator)
    locator.first = locator

    locator.count = Mock(return_value=1)
    locator.inner_text = Mock(return_value="Test Content")
    locator.input_value = Mock(return_value="test value")
    locator.is_checked = Mock(return_value=False)
    locator.click = Mock()
    locator.fill = Mock()
    locator.check = Mock()
    locator.uncheck = Mock()
    locator.select_option = Mock()
    locator.wait_for = Mock()
    locator.evaluate = Mock(return_value=[])
    locator.all = Mock(return_value=[])

    return locator


@pytest.fixture
def mock_page(mock_locator):
    """Create a mock Playwright sync Page object."""
    page = Mock()

    page.url = "https://example.com/test"
    page.goto = Mock(return_value=None)
    page.reload = Mock(return_value=None)
    page.title = Mock(return_value="Test Page")
    page.locator = Mock(return_value=mock_locator)
    page.screenshot = Mock(return_value=b"fake_screenshot_data")

    return page
