"""
Migration File Name Parser

Turns a file name such as ``1_create_users.up.sql`` into a
:class:`MigrationRecord`.

Accepted shapes:
- ``<version>_<identifier>.<up|down>.<ext>``: a directional migration
- ``<version>_<identifier>.<ext>``: a combined migration, treated as up
"""

import logging
import re

from ..exceptions import MigrationParseError
from .models import Direction, MigrationRecord

logger = logging.getLogger(__name__)

MIGRATION_NAME_PATTERN = re.compile(
    rf"^([0-9]+)_(.*)\.({Direction.DOWN.value}|{Direction.UP.value})\.(.*)$"
)
# A trailing "up" or "down" is a marker missing its extension, not an extension
COMBINED_NAME_PATTERN = re.compile(r"^([0-9]+)_(.*)\.(?!(?i:up|down)$)([^.]+)$")

# Versions are stored as unsigned 64-bit integers by migration engines
MAX_VERSION = 2**64 - 1


def parse(name: str) -> MigrationRecord:
    """
    Parse a migration file name.

    Args:
        name: A single path segment as returned by a directory listing

    Returns:
        Parsed migration record

    Raises:
        MigrationParseError: If the name has no leading version or is not
            a recognised migration file name
    """
    match = MIGRATION_NAME_PATTERN.match(name)
    if match:
        version, identifier, direction = match.group(1), match.group(2), Direction(match.group(3))
    else:
        match = COMBINED_NAME_PATTERN.match(name)
        if not match:
            raise MigrationParseError(name)
        version, identifier, direction = match.group(1), match.group(2), Direction.UP
        logger.debug(f"No direction marker in {name!r}, treating it as a combined up migration")

    version_number = int(version)
    if version_number > MAX_VERSION:
        raise MigrationParseError(name, context={"reason": "version out of range"})

    return MigrationRecord(
        version=version_number,
        direction=direction,
        identifier=identifier,
        raw=name,
    )
