"""Centralized error types."""


class RinError(Exception):
    """Base exception for rin errors."""
    pass


class ConfigError(RinError):
    """Configuration error."""
    pass


class ConfigReadError(ConfigError):
    """Configuration source could not be read."""
    pass


class ConfigParseError(ConfigError):
    """Configuration source is not well-formed."""
    pass


class ConfigValidationError(ConfigError):
    """Required configuration field is missing."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MissingConfigError(RinError):
    """Target lacks a sub-structure required to render a statement."""

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"target has no {field} configuration")
        self.field = field


class EventParseError(RinError):
    """S3 event notification could not be decoded."""
    pass
