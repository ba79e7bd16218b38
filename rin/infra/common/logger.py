"""Centralized logging configuration."""
import logging
import os
import sys
from typing import Optional


_logging_configured = False

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _level_from_env(default: int) -> int:
    """Resolve log level from RIN_LOG_LEVEL, falling back to default."""
    name = os.getenv("RIN_LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for rin.
    
    Args:
        level: Logging level. If None, uses RIN_LOG_LEVEL or INFO.
        format_string: Custom format string. If None, uses default.
        datefmt: Date format string. If None, uses default.
        force: If True, reconfigure even if already configured.
    """
    global _logging_configured
    
    if _logging_configured and not force:
        return
    
    logging.basicConfig(
        level=level if level is not None else _level_from_env(logging.INFO),
        format=format_string or DEFAULT_FORMAT,
        datefmt=datefmt or DEFAULT_DATEFMT,
        stream=sys.stdout,
        force=force,
    )
    
    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance, configuring logging on first use.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    if not _logging_configured:
        setup_logging()
    
    return logging.getLogger(name)
