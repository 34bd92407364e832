"""
Migration Source Exception Classes
Handles errors raised while enumerating, querying and reading migrations.
"""

import errno
import logging
from typing import Any

from .base import CodeupMigrateError


class MigrationParseError(CodeupMigrateError):
    """Raised when a file name cannot be parsed into a migration."""

    def __init__(self, name: str, **kwargs: Any):
        context = kwargs.pop("context", {})
        context["name"] = name

        super().__init__(f"no match for migration file name: {name!r}", context=context, **kwargs)
        self.name = name


class RemoteRequestError(CodeupMigrateError):
    """
    Raised when the remote service answered but reported a failure.

    The message is the remote error message, verbatim.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        remote_code: str | None = None,
        request_id: str | None = None,
        **kwargs: Any,
    ):
        """
        Initialize remote request error.

        Args:
            message: Error message reported by the remote service
            operation: Remote operation that was attempted
            remote_code: Error code reported by the remote service
            request_id: Request id reported by the remote service
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop("context", {})
        if operation:
            context["operation"] = operation
        if remote_code:
            context["remote_code"] = remote_code
        if request_id:
            context["request_id"] = request_id

        super().__init__(message, context=context, **kwargs)
        self.operation = operation
        self.remote_code = remote_code
        self.request_id = request_id


class SourceStateError(CodeupMigrateError):
    """Raised when a source driver is queried while it is not open."""

    def __init__(self, operation: str, state: str, **kwargs: Any):
        context = kwargs.pop("context", {})
        context.update({"operation": operation, "state": state})

        super().__init__(
            f"cannot {operation}: source driver is {state}", context=context, **kwargs
        )
        self.operation = operation
        self.state = state


class SourceRegistrationError(CodeupMigrateError):
    """Raised for duplicate or unknown source driver names."""

    def __init__(self, message: str, name: str | None = None, **kwargs: Any):
        context = kwargs.pop("context", {})
        if name:
            context["name"] = name

        super().__init__(message, context=context, **kwargs)
        self.name = name


class MigrationNotFoundError(CodeupMigrateError, FileNotFoundError):
    """
    Raised when a version or direction is absent from the migration registry.

    Behaves like a path error: it is a ``FileNotFoundError`` with ``errno``
    set to ``ENOENT`` and carries the attempted operation and the configured
    base path. Callers treat it as "no more migrations".
    """

    def __init__(self, op: str, path: str, **kwargs: Any):
        """
        Initialize not-found error.

        Args:
            op: Operation label, e.g. "next for version 3"
            path: Configured base path of the source
            **kwargs: Additional arguments for base class
        """
        context = kwargs.pop("context", {})
        context.update({"op": op, "path": path})
        kwargs.setdefault("log_level", logging.DEBUG)

        super().__init__(f"{op} {path}: file does not exist", context=context, **kwargs)
        self.op = op
        self.path = path
        self.errno = errno.ENOENT
        self.strerror = "file does not exist"
        self.filename = path

    def __str__(self) -> str:
        return self.message
