"""
Exception Hierarchy for codeup-migrate
Provides standardized error handling with consistent exception types.
"""

from .base import CodeupMigrateError, ConfigurationError
from .source import (
    MigrationNotFoundError,
    MigrationParseError,
    RemoteRequestError,
    SourceRegistrationError,
    SourceStateError,
)

__all__ = [
    # Base exceptions
    "CodeupMigrateError",
    "ConfigurationError",
    # Source exceptions
    "MigrationNotFoundError",
    "MigrationParseError",
    "RemoteRequestError",
    "SourceRegistrationError",
    "SourceStateError",
]
