"""Shared fixtures for the codeup-migrate test suite."""

from __future__ import annotations

import posixpath

import pytest

from codeup_migrate.config import CodeupOptions, RepositoryCoordinate
from codeup_migrate.exceptions import RemoteRequestError


class InMemoryFetcher:
    """ContentFetcher double serving files from a dict keyed by full path."""

    def __init__(self, files: dict[str, str] | None = None, listing: list[str] | None = None):
        self.files = dict(files or {})
        self.listing = listing
        self.list_error: Exception | None = None
        self.read_errors: dict[str, Exception] = {}
        self.list_calls: list[RepositoryCoordinate] = []
        self.read_calls: list[tuple[RepositoryCoordinate, str]] = []

    def list_tree(self, coordinate: RepositoryCoordinate) -> list[str]:
        self.list_calls.append(coordinate)
        if self.list_error is not None:
            raise self.list_error
        if self.listing is not None:
            return list(self.listing)
        return sorted(
            posixpath.basename(path)
            for path in self.files
            if posixpath.dirname(path) == coordinate.path
        )

    def read_file(self, coordinate: RepositoryCoordinate, file_path: str) -> str:
        self.read_calls.append((coordinate, file_path))
        if file_path in self.read_errors:
            raise self.read_errors[file_path]
        if file_path not in self.files:
            raise RemoteRequestError(f"file {file_path} not found", operation="get file blobs")
        return self.files[file_path]


@pytest.fixture
def coordinate() -> RepositoryCoordinate:
    return RepositoryCoordinate(
        project_id="2813489",
        organization_id="60de7a6852743a5162b5f957",
        access_token="pt-test-token",
        path="/db/migrations",
        ref="main",
    )


@pytest.fixture
def options(coordinate) -> CodeupOptions:
    return CodeupOptions(coordinate=coordinate)


@pytest.fixture
def migration_files() -> dict[str, str]:
    return {
        "/db/migrations/1_init.up.sql": "CREATE TABLE users (id INT);\n",
        "/db/migrations/1_init.down.sql": "DROP TABLE users;\n",
        "/db/migrations/3_add.up.sql": "ALTER TABLE users ADD COLUMN name TEXT;\n",
    }


@pytest.fixture
def fetcher(migration_files) -> InMemoryFetcher:
    return InMemoryFetcher(migration_files)
