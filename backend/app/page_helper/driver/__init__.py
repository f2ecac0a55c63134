"""
Driver Module

The capability interfaces page objects depend on, and the Playwright
implementation of them.
"""

from .contract import BrowserDriver, ElementContainer, ElementHandle
from .playwright_driver import PlaywrightDriver, PlaywrightElement

__all__ = [
    "BrowserDriver",
    "ElementContainer",
    "ElementHandle",
    "PlaywrightDriver",
    "PlaywrightElement"
]
