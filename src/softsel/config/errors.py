"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationError(ConfigurationError):
    """A configuration source holds a value softsel cannot use."""

    def __init__(self, source: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {source}={value!r}: {reason}")
        self.source = source
        self.value = value
