"""
Remote services used by the migration sources.
"""

from .codeup_client import CodeupContentFetcher, ContentFetcher

__all__ = [
    "CodeupContentFetcher",
    "ContentFetcher",
]
