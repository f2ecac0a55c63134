"""
Page Helper

Declarative page objects for browser tests:
- Declare each element once, with a kind, a name and a locator
- Get a predictable set of accessors generated per element kind
- Pages navigate, wait for a readiness element and check their title on load
- Runs on Playwright's synchronous API
"""

from .core.kinds import ElementKind
from .core.declarations import (
    direct_url,
    expected_title,
    expected_element,
    text_field,
    select_list,
    checkbox,
    radio_button,
    button,
    link,
    table,
    row,
    cell,
    div,
    span,
    p,
    li,
    h1,
    h2,
    h3,
    h4,
    h5,
    h6,
    dl,
    dt,
    dd,
    form,
    frame,
    image
)
from .core.registry import PageDefinition
from .core.page import BasePage
from .driver.contract import BrowserDriver, ElementHandle
from .driver.playwright_driver import PlaywrightDriver
from .config import PageHelperConfig, configure, get_config
from .errors import (
    PageHelperError,
    InvalidDeclaration,
    DefinitionConflict,
    MissingRule,
    TitleMismatch,
    PresenceTimeout
)

__all__ = [
    # Pages
    "BasePage",
    "PageDefinition",
    "ElementKind",
    # Page rules
    "direct_url",
    "expected_title",
    "expected_element",
    # Elements
    "text_field",
    "select_list",
    "checkbox",
    "radio_button",
    "button",
    "link",
    "table",
    "row",
    "cell",
    "div",
    "span",
    "p",
    "li",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "dl",
    "dt",
    "dd",
    "form",
    "frame",
    "image",
    # Drivers
    "BrowserDriver",
    "ElementHandle",
    "PlaywrightDriver",
    # Configuration
    "PageHelperConfig",
    "configure",
    "get_config",
    # Errors
    "PageHelperError",
    "InvalidDeclaration",
    "DefinitionConflict",
    "MissingRule",
    "TitleMismatch",
    "PresenceTimeout"
]

__version__ = "1.0.0"
