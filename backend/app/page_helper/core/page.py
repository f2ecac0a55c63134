"""
Base Page

Page objects subclass BasePage and declare their elements as class
attributes. When the subclass is created the declarations are turned into a
PageDefinition and the generated accessors are attached to the class.

Constructing a page runs the initialization protocol:

    visit=True:  goto -> await_expected_element -> has_expected_title
    visit=False: await_expected_element -> has_expected_title

Steps without a declared rule are skipped. A failing step raises out of the
constructor and is never retried.
"""

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from ..config import PageHelperConfig, get_config
from ..errors import MissingRule, PresenceTimeout, TitleMismatch
from .registry import PageDefinition, build_definition, is_declaration, merge_definitions
from .resolver import resolve, resolve_in_scope

if TYPE_CHECKING:
    from ..driver.contract import BrowserDriver, ElementHandle

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for page objects.

    Example:
        class LoginPage(BasePage):
            url = direct_url("https://example.com/login")
            title = expected_title("Sign in")

            username = text_field(name="username")
            sign_in = button(id="login-button")

        page = LoginPage(driver, visit=True)
        page.username("standard_user")
        page.sign_in()
    """

    definition: ClassVar[PageDefinition] = PageDefinition(page_name="BasePage")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        items = [(name, value) for name, value in cls.__dict__.items() if is_declaration(value)]
        for name, _ in items:
            delattr(cls, name)

        base = merge_definitions(cls.__name__, [
            parent.definition for parent in cls.__bases__ if issubclass(parent, BasePage)
        ])
        taken = {name for name in dir(cls) if not name.startswith("__")}
        definition = build_definition(cls.__name__, items, base=base, taken=taken)

        for name, accessor in definition.accessors.items():
            if name not in base.accessors:
                setattr(cls, name, accessor.function)
        cls.definition = definition

    def __init__(
        self,
        driver: "BrowserDriver",
        visit: bool = False,
        config: Optional[PageHelperConfig] = None
    ):
        """
        Bind the page to a driver and run the initialization protocol.

        Args:
            driver: Live browser session; borrowed, never closed
            visit: Navigate to the page's direct_url first
            config: Settings; defaults to the global config

        Raises:
            MissingRule: visit requested but no direct_url declared
            PresenceTimeout: The expected element never appeared
            TitleMismatch: The title does not match expected_title
        """
        self._driver = driver
        self._config = config or get_config()

        if visit:
            self.goto()
        if self.definition.presence is not None:
            self.await_expected_element()
        if self.definition.title_rule is not None:
            self.has_expected_title()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} driver={self._driver!r}>"

    @property
    def driver(self) -> "BrowserDriver":
        """The underlying browser driver."""
        return self._driver

    @property
    def config(self) -> PageHelperConfig:
        return self._config

    def element(self, name: str) -> "ElementHandle":
        """Resolve a declared element by name. Resolved afresh on every call."""
        return resolve_in_scope(self._driver, self.definition.by_name, name)

    def forward(self, operation: str, *args, **kwargs) -> Any:
        """
        Pass an operation with no generated accessor to the driver.

        Example:
            page.forward("reload")
            page.forward("url")
        """
        return self._driver.invoke(operation, *args, **kwargs)

    # ==================== Page Rules ====================

    def goto(self) -> None:
        """Navigate to the page's direct_url."""
        url = self.definition.url
        if url is None:
            raise MissingRule(f"{type(self).__name__} has no direct_url to navigate to")
        logger.info(f"[{type(self).__name__}] goto {url}")
        self._driver.navigate(url)

    def await_expected_element(self) -> "ElementHandle":
        """
        Block until the expected element is present.

        Returns:
            The element handle

        Raises:
            PresenceTimeout: Not present within the gate's timeout
        """
        gate = self.definition.presence
        if gate is None:
            raise MissingRule(f"{type(self).__name__} declares no expected_element")

        timeout = gate.timeout or self._config.presence_timeout
        logger.info(f"[{type(self).__name__}] waiting up to {timeout}s for {gate.describe()}")

        handle = resolve(self._driver, gate)
        if not handle.wait_until_present(timeout, self._config.poll_interval):
            logger.warning(f"[{type(self).__name__}] {gate.describe()} not present after {timeout}s")
            raise PresenceTimeout(gate.describe(), timeout)
        return handle

    def has_expected_title(self) -> bool:
        """
        Check the live title against the expected_title rule.

        Raises:
            TitleMismatch: With both the expected and actual title
        """
        rule = self.definition.title_rule
        if rule is None:
            raise MissingRule(f"{type(self).__name__} declares no expected_title")

        actual = self._driver.current_title()
        if not rule.matches(actual):
            logger.warning(f"[{type(self).__name__}] title mismatch: {actual!r}")
            raise TitleMismatch(rule.describe(), actual)
        return True
