"""
Codeup Migration Source

Source driver that reads migration files from a directory of an Alibaba
Cloud Codeup repository.

Lifecycle:
- ``open`` lists the configured directory once and parses every entry
  into a fresh registry; any failure aborts without returning a driver
- ``first``/``prev``/``next`` are pure registry queries
- ``read_up``/``read_down`` fetch one file body per call
- ``close`` releases nothing; the driver only holds its catalog
"""

import io
import logging
import posixpath
from enum import Enum
from typing import Callable

from ..config import (
    ClientCredentials,
    CodeupOptions,
    coordinate_from_url,
    credentials_from_url,
    split_source_url,
)
from ..exceptions import MigrationNotFoundError, SourceStateError
from ..migrations import MigrationRecord, MigrationRegistry, parse
from ..services import CodeupContentFetcher, ContentFetcher
from .driver import SourceDriver

logger = logging.getLogger(__name__)

FetcherFactory = Callable[[ClientCredentials, CodeupOptions], ContentFetcher]


class SourceState(str, Enum):
    """Lifecycle state of a source driver."""

    UNOPENED = "unopened"
    OPENED = "opened"
    CLOSED = "closed"


class CodeupSource(SourceDriver):
    """
    Migration source backed by a Codeup repository directory.

    An instance created directly is an unopened prototype suitable for
    registration; :meth:`open` and :meth:`with_instance` return opened
    drivers. Each opened driver owns its own registry, populated once and
    read-only afterwards.
    """

    def __init__(
        self,
        fetcher_factory: FetcherFactory = CodeupContentFetcher.from_credentials,
    ) -> None:
        """
        Initialize an unopened source.

        Args:
            fetcher_factory: Builds the content fetcher from the URL
                credentials and options when :meth:`open` is called
        """
        self._fetcher_factory = fetcher_factory
        self._fetcher: ContentFetcher | None = None
        self._options: CodeupOptions | None = None
        self._migrations = MigrationRegistry()
        self._state = SourceState.UNOPENED

    @property
    def state(self) -> SourceState:
        return self._state

    @property
    def options(self) -> CodeupOptions | None:
        return self._options

    @property
    def migrations(self) -> MigrationRegistry:
        """Catalog of the migrations found while opening."""
        return self._migrations

    def open(self, url: str) -> "CodeupSource":
        """
        Return a new opened driver configured from ``url``.

        Args:
            url: ``codeup://`` source URL

        Returns:
            Opened source driver

        Raises:
            ConfigurationError: If the URL is malformed
            MigrationParseError: If a directory entry is not a migration file
            RemoteRequestError: If the remote service rejects the listing
        """
        parts = split_source_url(url)
        options = CodeupOptions(coordinate=coordinate_from_url(parts))
        fetcher = self._fetcher_factory(credentials_from_url(parts), options)

        source = self.with_instance(fetcher, options)
        source._fetcher_factory = self._fetcher_factory
        return source

    @classmethod
    def with_instance(
        cls,
        fetcher: ContentFetcher,
        options: CodeupOptions,
    ) -> "CodeupSource":
        """
        Open a driver over an existing fetcher.

        Args:
            fetcher: Remote file access to read migrations through
            options: Driver options

        Returns:
            Opened source driver
        """
        source = cls()
        source._fetcher = fetcher
        source._options = options
        source._read_directory()
        source._state = SourceState.OPENED
        return source

    def close(self) -> None:
        self._state = SourceState.CLOSED

    def first(self) -> int:
        self._ensure_open("first")
        version = self._migrations.first()
        if version is None:
            raise self._not_found("first")
        return version

    def prev(self, version: int) -> int:
        self._ensure_open("prev")
        prev_version = self._migrations.prev(version)
        if prev_version is None:
            raise self._not_found(f"prev for version {version}")
        return prev_version

    def next(self, version: int) -> int:
        self._ensure_open("next")
        next_version = self._migrations.next(version)
        if next_version is None:
            raise self._not_found(f"next for version {version}")
        return next_version

    def read_up(self, version: int) -> tuple[io.StringIO, str]:
        self._ensure_open("read up")
        return self._read(self._migrations.up(version), version)

    def read_down(self, version: int) -> tuple[io.StringIO, str]:
        self._ensure_open("read down")
        return self._read(self._migrations.down(version), version)

    def _read(self, migration: MigrationRecord | None, version: int) -> tuple[io.StringIO, str]:
        if migration is None:
            raise self._not_found(f"read version {version}")

        file_path = posixpath.join(self._options.coordinate.path, migration.raw)
        # The API returns the content itself, not a body stream
        content = self._fetcher.read_file(self._options.coordinate, file_path)
        return io.StringIO(content), migration.identifier

    def _read_directory(self) -> None:
        """Populate the registry from the configured directory."""
        coordinate = self._options.coordinate
        logger.info(
            f"Reading migrations from project {coordinate.project_id!r} "
            f"path {coordinate.path!r} at {coordinate.ref!r}"
        )

        names = self._fetcher.list_tree(coordinate)
        for name in names:
            migration = parse(name)
            self._migrations.insert(migration)
            logger.debug(f"Found {migration.direction.value} migration {migration.version}: {name}")

        logger.info(f"Loaded {len(self._migrations)} migration versions from {len(names)} files")

    def _ensure_open(self, operation: str) -> None:
        if self._state is not SourceState.OPENED:
            raise SourceStateError(operation, self._state.value)

    def _not_found(self, op: str) -> MigrationNotFoundError:
        return MigrationNotFoundError(op, self._options.coordinate.path)

    def __repr__(self) -> str:
        path = self._options.coordinate.path if self._options else None
        return f"CodeupSource(state={self._state.value!r}, path={path!r})"
