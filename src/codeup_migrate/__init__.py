"""
codeup-migrate

Migration source driver that reads versioned migration files from an
Alibaba Cloud Codeup repository instead of a local directory.

Register it explicitly with a source registry::

    registry = SourceRegistry()
    register_codeup(registry)
    source = registry.open("codeup://devops.cn-hangzhou.aliyuncs.com/db/migrations?projectId=...")
"""

from .exceptions import CodeupMigrateError, MigrationNotFoundError
from .migrations import Direction, MigrationRecord, MigrationRegistry
from .source import CodeupSource, SourceDriver, SourceRegistry, register_codeup

__version__ = "0.1.0"

__all__ = [
    "CodeupMigrateError",
    "CodeupSource",
    "Direction",
    "MigrationNotFoundError",
    "MigrationRecord",
    "MigrationRegistry",
    "SourceDriver",
    "SourceRegistry",
    "register_codeup",
]
