"""Common infrastructure utilities."""
from rin.infra.common.logger import setup_logging, get_logger
from rin.infra.common.errors import (
    RinError,
    ConfigError,
    ConfigReadError,
    ConfigParseError,
    ConfigValidationError,
    MissingConfigError,
    EventParseError,
)
from rin.infra.common.paths import S3PathBuilder
from rin.infra.common.quoting import quote_identifier, quote_literal, qualify_table

__all__ = [
    "setup_logging",
    "get_logger",
    "RinError",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigValidationError",
    "MissingConfigError",
    "EventParseError",
    "S3PathBuilder",
    "quote_identifier",
    "quote_literal",
    "qualify_table",
]
