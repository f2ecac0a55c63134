"""
Driver Contract

The capabilities page objects need from a browser driver. Page objects only
ever talk to a driver through these interfaces; anything else the driver can
do is reached explicitly through BrowserDriver.invoke().
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..core.kinds import ElementKind


class ElementContainer(ABC):
    """Something elements can be looked up in: the page or a parent element."""

    @abstractmethod
    def find_element(self, kind: ElementKind, identifier: Mapping[str, Any]) -> "ElementHandle":
        """Find the first element of a kind matching every identifier attribute."""


class ElementHandle(ElementContainer):
    """A located element. Owned by the driver, borrowed by page objects."""

    @abstractmethod
    def exists(self) -> bool:
        pass

    @abstractmethod
    def text(self) -> str:
        pass

    @abstractmethod
    def click(self) -> None:
        pass

    @abstractmethod
    def get_value(self) -> Any:
        """Current value of a field, or the selected value of a select list."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        pass

    @abstractmethod
    def is_checked(self) -> bool:
        pass

    @abstractmethod
    def set_checked(self) -> None:
        pass

    @abstractmethod
    def clear_checked(self) -> None:
        pass

    @abstractmethod
    def is_selected(self, value: Optional[Any] = None) -> bool:
        """Whether value is selected (select list), or this element is selected (radio)."""

    @abstractmethod
    def select(self, value: Optional[Any] = None) -> None:
        """Select value (select list), or select this element (radio)."""

    def wait_until_present(self, timeout: float, interval: float = 0.1) -> bool:
        """
        Poll exists() until it is true or timeout seconds pass.

        Returns:
            True if the element appeared, False on timeout
        """
        deadline = time.monotonic() + timeout
        while True:
            if self.exists():
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(interval, remaining))


class BrowserDriver(ElementContainer):
    """A live browser session, shared by the page objects that borrow it."""

    @abstractmethod
    def navigate(self, url: str) -> None:
        pass

    @abstractmethod
    def current_title(self) -> str:
        pass

    @abstractmethod
    def current_url(self) -> str:
        pass

    @abstractmethod
    def invoke(self, operation: str, *args, **kwargs) -> Any:
        """
        Run a driver operation the page helper has no accessor for.

        Arguments, including any callback, are passed through unchanged and
        the result is returned as is.
        """
