"""
Page Helper Configuration

Runtime settings shared by every page instance. Values can be supplied
directly, or read from PAGE_HELPER_* environment variables.
"""

import os
import logging
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class PageHelperConfig(BaseModel):
    """Settings for page initialization and presence waiting."""
    presence_timeout: int = Field(default=30, gt=0)  # seconds
    poll_interval: float = Field(default=0.1, gt=0)  # seconds between presence probes
    default_headless: bool = True  # used by scripts that launch a browser

    @classmethod
    def from_env(cls) -> "PageHelperConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Raw strings are handed to the model, so bad values raise
        pydantic's ValidationError like any other invalid field.
        """
        values = {}

        timeout = os.getenv("PAGE_HELPER_PRESENCE_TIMEOUT")
        if timeout:
            values["presence_timeout"] = timeout.strip()

        interval = os.getenv("PAGE_HELPER_POLL_INTERVAL")
        if interval:
            values["poll_interval"] = interval.strip()

        # true/false, 1/0, yes/no, on/off
        headless = os.getenv("PAGE_HELPER_HEADLESS")
        if headless:
            values["default_headless"] = headless.strip()

        if values:
            logger.debug(f"Config overrides from environment: {values}")
        return cls(**values)


_config: Optional[PageHelperConfig] = None


def get_config() -> PageHelperConfig:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = PageHelperConfig.from_env()
    return _config


def configure(**overrides) -> PageHelperConfig:
    """Replace the global config. Unspecified fields keep their defaults."""
    global _config
    _config = PageHelperConfig(**overrides)
    return _config


def reset_config() -> None:
    """Forget the global config so the next get_config() re-reads the environment."""
    global _config
    _config = None
