"""Shared utilities for identifier creation.

This module provides the configuration objects, structured error types and
logging utilities used across the numeric and character layers.
"""

from .errors import (
    CharacterSetError,
    DomainError,
    ErrorKind,
    IdentifierError,
    StringValidationError,
    ValueRangeError,
)
from .config import (
    CacheConfig,
    ConfigError,
    ConfigValidationError,
    GlobalConfig,
    IdentifierConfig,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "CharacterSetError",
    "DomainError",
    "ErrorKind",
    "IdentifierError",
    "StringValidationError",
    "ValueRangeError",
    "CacheConfig",
    "ConfigError",
    "ConfigValidationError",
    "GlobalConfig",
    "IdentifierConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
