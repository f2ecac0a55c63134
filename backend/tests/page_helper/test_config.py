"""
Unit tests for page helper configuration.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "app"))

from pydantic import ValidationError

from page_helper.config import PageHelperConfig, configure, get_config, reset_config


class TestPageHelperConfig:
    """Test the config model."""

    def test_defaults(self):
        """Test default values."""
        config = PageHelperConfig()

        assert config.presence_timeout == 30
        assert config.poll_interval == 0.1
        assert config.default_headless is True

    def test_rejects_non_positive_timeout(self):
        """Test that the presence timeout must be positive."""
        with pytest.raises(ValidationError):
            PageHelperConfig(presence_timeout=0)

    def test_rejects_non_positive_interval(self):
        """Test that the poll interval must be positive."""
        with pytest.raises(ValidationError):
            PageHelperConfig(poll_interval=-1)


class TestFromEnv:
    """Test reading PAGE_HELPER_* environment variables."""

    def test_no_variables(self, monkeypatch):
        """Test that an empty environment gives the defaults."""
        for name in ["PAGE_HELPER_PRESENCE_TIMEOUT", "PAGE_HELPER_POLL_INTERVAL", "PAGE_HELPER_HEADLESS"]:
            monkeypatch.delenv(name, raising=False)

        assert PageHelperConfig.from_env() == PageHelperConfig()

    def test_overrides(self, monkeypatch):
        """Test every variable."""
        monkeypatch.setenv("PAGE_HELPER_PRESENCE_TIMEOUT", "5")
        monkeypatch.setenv("PAGE_HELPER_POLL_INTERVAL", "0.5")
        monkeypatch.setenv("PAGE_HELPER_HEADLESS", "false")

        config = PageHelperConfig.from_env()

        assert config.presence_timeout == 5
        assert config.poll_interval == 0.5
        assert config.default_headless is False

    def test_headless_truthy(self, monkeypatch):
        """Test that anything but an off value keeps headless on."""
        monkeypatch.setenv("PAGE_HELPER_HEADLESS", "1")

        assert PageHelperConfig.from_env().default_headless is True

    def test_non_numeric_timeout(self, monkeypatch):
        """Test that unparsable numbers fail validation, not int()."""
        monkeypatch.setenv("PAGE_HELPER_PRESENCE_TIMEOUT", "abc")

        with pytest.raises(ValidationError):
            PageHelperConfig.from_env()

    def test_non_numeric_interval(self, monkeypatch):
        """Test that unparsable intervals fail validation."""
        monkeypatch.setenv("PAGE_HELPER_POLL_INTERVAL", "fast")

        with pytest.raises(ValidationError):
            PageHelperConfig.from_env()

    def test_unrecognised_headless(self, monkeypatch):
        """Test that headless must be a recognised boolean."""
        monkeypatch.setenv("PAGE_HELPER_HEADLESS", "sometimes")

        with pytest.raises(ValidationError):
            PageHelperConfig.from_env()

    def test_invalid_value(self, monkeypatch):
        """Test that invalid environment values are not ignored."""
        monkeypatch.setenv("PAGE_HELPER_PRESENCE_TIMEOUT", "-3")

        with pytest.raises(ValidationError):
            PageHelperConfig.from_env()


class TestGlobalConfig:
    """Test the module-level config instance."""

    def test_get_config_is_cached(self):
        """Test that get_config returns one instance."""
        assert get_config() is get_config()

    def test_configure_replaces(self):
        """Test that configure installs a new instance."""
        config = configure(presence_timeout=2)

        assert get_config() is config
        assert config.presence_timeout == 2
        assert config.poll_interval == 0.1

    def test_reset_rereads_environment(self, monkeypatch):
        """Test that reset_config drops the cached instance."""
        configure(presence_timeout=2)
        monkeypatch.setenv("PAGE_HELPER_PRESENCE_TIMEOUT", "7")

        reset_config()

        assert get_config().presence_timeout == 7
