"""
Migration Registry

Ordered in-memory catalog of parsed migrations, keyed by version.
Each version holds an optional up record and an optional down record.
"""

import bisect
import logging
from dataclasses import dataclass

from .models import Direction, MigrationRecord

logger = logging.getLogger(__name__)


@dataclass
class _VersionEntry:
    up: MigrationRecord | None = None
    down: MigrationRecord | None = None


class MigrationRegistry:
    """
    Ordered collection of migration records.

    Versions are traversed in strictly increasing numeric order. A version
    only exists once a record has been inserted for it. Absence is reported
    as ``None`` rather than raised; callers decide how to surface it.

    The registry is not safe for concurrent mutation. Sources populate it
    once while opening and only read from it afterwards.
    """

    def __init__(self) -> None:
        self._entries: dict[int, _VersionEntry] = {}
        self._index: list[int] = []

    def insert(self, record: MigrationRecord) -> bool:
        """
        Add a record to its version's entry.

        Re-inserting the same version and direction replaces the earlier
        record (last insert wins).

        Args:
            record: Parsed migration record

        Returns:
            True if the record was stored
        """
        entry = self._entries.get(record.version)
        if entry is None:
            entry = _VersionEntry()
            self._entries[record.version] = entry
            bisect.insort(self._index, record.version)

        if record.direction is Direction.UP:
            previous, entry.up = entry.up, record
        else:
            previous, entry.down = entry.down, record

        if previous is not None:
            logger.debug(
                f"Replacing {record.direction.value} migration {record.version}: "
                f"{previous.raw!r} -> {record.raw!r}"
            )
        return True

    def first(self) -> int | None:
        """Return the smallest version, or None if the registry is empty."""
        if not self._index:
            return None
        return self._index[0]

    def prev(self, version: int) -> int | None:
        """Return the version immediately before ``version``, if any."""
        pos = self._find(version)
        if pos < 1:
            return None
        return self._index[pos - 1]

    def next(self, version: int) -> int | None:
        """Return the version immediately after ``version``, if any."""
        pos = self._find(version)
        if pos < 0 or pos + 1 >= len(self._index):
            return None
        return self._index[pos + 1]

    def up(self, version: int) -> MigrationRecord | None:
        """Return the up record for ``version``, if one was inserted."""
        entry = self._entries.get(version)
        return entry.up if entry else None

    def down(self, version: int) -> MigrationRecord | None:
        """Return the down record for ``version``, if one was inserted."""
        entry = self._entries.get(version)
        return entry.down if entry else None

    def versions(self) -> tuple[int, ...]:
        """All versions in ascending order."""
        return tuple(self._index)

    def _find(self, version: int) -> int:
        """Position of ``version`` in the index, -1 if absent."""
        pos = bisect.bisect_left(self._index, version)
        if pos < len(self._index) and self._index[pos] == version:
            return pos
        return -1

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, version: object) -> bool:
        return version in self._entries

    def __repr__(self) -> str:
        return f"MigrationRegistry(versions={self._index!r})"
