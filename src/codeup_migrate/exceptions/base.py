"""
Base Exception Classes
Provides the foundation for the codeup-migrate exception hierarchy.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class CodeupMigrateError(Exception):
    """
    Base exception class for all codeup-migrate errors.

    Provides common functionality for error context and logging.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        log_level: int = logging.ERROR,
    ):
        """
        Initialize base exception.

        Args:
            message: Technical error message for logging
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
            log_level: Logging level for this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.log_level = log_level

        # Log the error automatically
        self._log_error()

    def _log_error(self) -> None:
        """Log the error with appropriate level and context."""
        log_message = f"[{self.error_code}] {self.message}"
        if self.context:
            log_message += f" | Context: {self.context}"

        logger.log(self.log_level, log_message)


class ConfigurationError(CodeupMigrateError):
    """Raised when the source URL or driver configuration is invalid."""

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop("context", {})
        if config_key:
            context["config_key"] = config_key

        super().__init__(message, context=context, **kwargs)
        self.config_key = config_key
