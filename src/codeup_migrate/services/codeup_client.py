"""
Codeup Content Fetcher

Reads migration files out of a Codeup repository through the Alibaba Cloud
DevOps OpenAPI. Exposes exactly two operations behind the
:class:`ContentFetcher` protocol so a source driver can be backed by an
in-memory double in tests.
"""

import logging
from typing import Any, Protocol

from alibabacloud_devops20210625 import models as devops_models
from alibabacloud_devops20210625.client import Client as DevopsClient

from ..config import ClientCredentials, CodeupOptions, RepositoryCoordinate
from ..exceptions import RemoteRequestError

logger = logging.getLogger(__name__)


class ContentFetcher(Protocol):
    """Remote file access needed by a migration source."""

    def list_tree(self, coordinate: RepositoryCoordinate) -> list[str]:
        """
        List the entry names directly under ``coordinate.path``.

        Raises:
            RemoteRequestError: If the remote service reports a failure
        """
        ...

    def read_file(self, coordinate: RepositoryCoordinate, file_path: str) -> str:
        """
        Return the text content of ``file_path`` at ``coordinate.ref``.

        Raises:
            RemoteRequestError: If the remote service reports a failure
        """
        ...


class CodeupContentFetcher:
    """
    ContentFetcher backed by the DevOps OpenAPI client.

    Exceptions raised by the client itself (network, signing, decoding) are
    not caught and reach the caller unchanged. A response whose body reports
    ``success`` false becomes a :class:`RemoteRequestError` carrying the
    remote error message verbatim.

    Listing is a single call; results beyond what the service returns in
    one response are not fetched.
    """

    def __init__(self, client: DevopsClient, options: CodeupOptions) -> None:
        """
        Initialize the fetcher.

        Args:
            client: Configured DevOps OpenAPI client
            options: Driver options supplying headers and runtime settings
        """
        self.client = client
        self.headers = dict(options.headers)
        self.runtime = options.runtime.to_runtime_options()

    @classmethod
    def from_credentials(
        cls, credentials: ClientCredentials, options: CodeupOptions
    ) -> "CodeupContentFetcher":
        """Create a fetcher with a new DevOps client for ``credentials``."""
        logger.debug(f"Creating DevOps client for endpoint {credentials.endpoint!r}")
        client = DevopsClient(credentials.to_openapi_config())
        return cls(client, options)

    def list_tree(self, coordinate: RepositoryCoordinate) -> list[str]:
        request = devops_models.ListRepositoryTreeRequest(
            organization_id=coordinate.organization_id,
            access_token=coordinate.access_token,
            path=coordinate.path,
        )
        logger.debug(f"Listing repository tree {coordinate.project_id}:{coordinate.path}")

        response = self.client.list_repository_tree_with_options(
            coordinate.project_id, request, self.headers, self.runtime
        )
        body = self._checked_body(response, "list repository tree")

        return [entry.name or "" for entry in body.result or []]

    def read_file(self, coordinate: RepositoryCoordinate, file_path: str) -> str:
        request = devops_models.GetFileBlobsRequest(
            organization_id=coordinate.organization_id,
            access_token=coordinate.access_token,
            file_path=file_path,
            ref=coordinate.ref,
        )
        logger.debug(f"Reading {file_path} at {coordinate.ref}")

        response = self.client.get_file_blobs_with_options(
            coordinate.project_id, request, self.headers, self.runtime
        )
        body = self._checked_body(response, "get file blobs")

        if body.result is None:
            return ""
        return body.result.content or ""

    @staticmethod
    def _checked_body(response: Any, operation: str) -> Any:
        """Return the response body, raising if the service reported failure."""
        body = response.body
        if not body.success:
            raise RemoteRequestError(
                body.error_message or "",
                operation=operation,
                remote_code=body.error_code,
                request_id=body.request_id,
            )
        return body
