"""
Source Driver Contract

Interface a migration engine expects from a migration source plug-in.
A driver enumerates the available versions and serves the body of each
up or down migration.
"""

from abc import ABC, abstractmethod
from typing import TextIO


class SourceDriver(ABC):
    """
    Base class for migration source drivers.

    Absence of a version (no first migration, no previous or next version,
    no body for a direction) is reported by raising ``FileNotFoundError``,
    which engines treat as "no more migrations".
    """

    @abstractmethod
    def open(self, url: str) -> "SourceDriver":
        """
        Return a new driver configured from ``url``.

        Engines call this once per instance, on a prototype driver.
        """

    @abstractmethod
    def close(self) -> None:
        """Release anything held by the driver."""

    @abstractmethod
    def first(self) -> int:
        """Return the very first migration version."""

    @abstractmethod
    def prev(self, version: int) -> int:
        """Return the version before ``version``."""

    @abstractmethod
    def next(self, version: int) -> int:
        """Return the version after ``version``."""

    @abstractmethod
    def read_up(self, version: int) -> tuple[TextIO, str]:
        """Return the up migration body and its identifier."""

    @abstractmethod
    def read_down(self, version: int) -> tuple[TextIO, str]:
        """Return the down migration body and its identifier."""

    def __enter__(self) -> "SourceDriver":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
