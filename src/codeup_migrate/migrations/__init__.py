"""
Migration Catalog

Parsing of migration file names and the ordered registry the source
drivers query.
"""

from .models import Direction, MigrationRecord
from .parser import parse
from .registry import MigrationRegistry

__all__ = [
    "Direction",
    "MigrationRecord",
    "MigrationRegistry",
    "parse",
]
