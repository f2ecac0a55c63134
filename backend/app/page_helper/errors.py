"""
Page Helper Errors

Every condition raised by the page helper itself derives from PageHelperError.
Errors raised by the browser driver are never wrapped and propagate unchanged.
"""

from typing import Optional


class PageHelperError(Exception):
    """Base exception for all page helper errors."""


class InvalidDeclaration(PageHelperError):
    """
    Raised when a single declaration is malformed.

    Example:
        text_field(lambda browser: ..., name="q")  # resolver and identifier together
    """


class DefinitionConflict(PageHelperError):
    """
    Raised at class creation when two declarations would generate the same
    accessor name, or a declaration shadows an existing page member.

    Attributes:
        page: Name of the page class being defined
        operation: The colliding accessor name
        first: Who owned the name first
        second: The declaration that tried to reuse it
    """

    def __init__(self, page: str, operation: str, first: str, second: str):
        self.page = page
        self.operation = operation
        self.first = first
        self.second = second
        super().__init__(
            f"{page}: accessor '{operation}' generated by {second} "
            f"is already defined by {first}"
        )


class MissingRule(PageHelperError):
    """Raised when an operation needs a page rule that was never declared."""


class TitleMismatch(PageHelperError, AssertionError):
    """
    Raised when the live page title does not satisfy the expected_title rule.

    Also an AssertionError so test runners report it as a failed assertion.
    """

    def __init__(self, expected: str, actual: Optional[str]):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected title '{expected}' instead of '{actual}'")


class PresenceTimeout(PageHelperError):
    """
    Raised when the expected_element gate does not appear in time.

    Attributes:
        locator: Human readable description of what was awaited
        timeout: Seconds waited before giving up
    """

    def __init__(self, locator: str, timeout: float):
        self.locator = locator
        self.timeout = timeout
        super().__init__(
            f"timed out after {timeout} seconds, waiting for {locator} to become present"
        )
