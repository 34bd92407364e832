"""
Migration Models
Data models describing a single migration file found in a source.
These are pure data classes without business logic.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Direction a migration file applies in."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class MigrationRecord:
    """
    One parsed migration file.

    Created once while a source directory is enumerated and never
    modified afterwards.
    """

    version: int
    direction: Direction
    # Descriptive part of the file name, used for display only
    identifier: str
    # Original file name, used to fetch the body later
    raw: str

    def __post_init__(self) -> None:
        """Validate required fields."""
        if self.version < 0:
            raise ValueError("Migration version cannot be negative")
        if not self.raw:
            raise ValueError("Migration raw name cannot be empty")
