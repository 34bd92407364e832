"""
Migration source drivers and their registration.
"""

from .codeup import CodeupSource, SourceState
from .driver import SourceDriver
from .registry import SourceRegistry, register_codeup

__all__ = [
    "CodeupSource",
    "SourceDriver",
    "SourceRegistry",
    "SourceState",
    "register_codeup",
]
