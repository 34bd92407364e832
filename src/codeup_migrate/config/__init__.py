"""
Configuration for the Codeup migration source.
"""

from .source_config import (
    ACCESS_KEY_ID_ENV,
    ACCESS_KEY_SECRET_ENV,
    DEFAULT_REF,
    ClientCredentials,
    CodeupOptions,
    RepositoryCoordinate,
    RuntimeSettings,
    coordinate_from_url,
    credentials_from_url,
    split_source_url,
)

__all__ = [
    "ACCESS_KEY_ID_ENV",
    "ACCESS_KEY_SECRET_ENV",
    "DEFAULT_REF",
    "ClientCredentials",
    "CodeupOptions",
    "RepositoryCoordinate",
    "RuntimeSettings",
    "coordinate_from_url",
    "credentials_from_url",
    "split_source_url",
]
