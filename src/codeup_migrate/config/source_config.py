"""
Source Configuration

Pydantic models for the Codeup source driver and the helpers that build
them from a source URL of the form::

    codeup://<key>:<secret>@<endpoint>/<path>?projectId=..&organizationId=..&accessToken=..#<ref>
"""

import logging
import os
from urllib.parse import SplitResult, parse_qs, unquote, urlsplit

from alibabacloud_tea_openapi import models as open_api_models
from alibabacloud_tea_util import models as util_models
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REF = "master"
ACCESS_KEY_ID_ENV = "ALIBABA_CLOUD_ACCESS_KEY_ID"
ACCESS_KEY_SECRET_ENV = "ALIBABA_CLOUD_ACCESS_KEY_SECRET"


class RepositoryCoordinate(BaseModel):
    """Where the migrations live inside a Codeup repository."""

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(default="", description="Codeup repository (project) id")
    organization_id: str = Field(default="", description="Organization owning the repository")
    access_token: str = Field(default="", description="Personal access token")
    path: str = Field(default="", description="Directory holding the migration files")
    ref: str = Field(default=DEFAULT_REF, description="Branch, tag or commit to read from")

    @field_validator("ref", mode="before")
    @classmethod
    def default_ref(cls, v: str | None) -> str:
        """An empty ref falls back to the default branch."""
        return v or DEFAULT_REF


class ClientCredentials(BaseModel):
    """Credentials and endpoint for the DevOps OpenAPI client."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str = ""
    access_key_secret: str = Field(default="", repr=False)
    endpoint: str = ""

    def to_openapi_config(self) -> open_api_models.Config:
        """Build the vendor client configuration."""
        return open_api_models.Config(
            access_key_id=self.access_key_id,
            access_key_secret=self.access_key_secret,
            endpoint=self.endpoint,
        )


class RuntimeSettings(BaseModel):
    """Per-call runtime options handed to the vendor client untouched."""

    model_config = ConfigDict(frozen=True)

    read_timeout: int | None = Field(default=None, gt=0, description="Read timeout in ms")
    connect_timeout: int | None = Field(default=None, gt=0, description="Connect timeout in ms")

    def to_runtime_options(self) -> util_models.RuntimeOptions:
        """Build the vendor runtime options, leaving unset values to the client."""
        return util_models.RuntimeOptions(
            read_timeout=self.read_timeout,
            connect_timeout=self.connect_timeout,
        )


class CodeupOptions(BaseModel):
    """Complete configuration of one Codeup source driver."""

    model_config = ConfigDict(frozen=True)

    coordinate: RepositoryCoordinate
    headers: dict[str, str] = Field(default_factory=dict)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)


def split_source_url(url: str) -> SplitResult:
    """
    Split a source URL, translating parse failures.

    Raises:
        ConfigurationError: If the URL cannot be parsed
    """
    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid source URL: {e}", config_key="url") from e
    return parts


def coordinate_from_url(parts: SplitResult) -> RepositoryCoordinate:
    """
    Build the repository coordinate from a split source URL.

    Args:
        parts: Result of :func:`split_source_url`

    Returns:
        Repository coordinate; the fragment is the ref, defaulting to "master"
    """
    query = parse_qs(parts.query)

    def first(key: str) -> str:
        values = query.get(key)
        return values[0] if values else ""

    return RepositoryCoordinate(
        project_id=first("projectId"),
        organization_id=first("organizationId"),
        access_token=first("accessToken"),
        path=unquote(parts.path),
        ref=unquote(parts.fragment),
    )


def credentials_from_url(parts: SplitResult) -> ClientCredentials:
    """
    Build client credentials from a split source URL.

    The user-info name is the access key id and the password the secret.
    A missing name or password falls back to the standard Alibaba Cloud
    environment variables.
    """
    userinfo, at, hostport = parts.netloc.rpartition("@")
    if not at:
        userinfo, hostport = "", parts.netloc

    username, colon, password = userinfo.partition(":")
    key = unquote(username)
    if not key:
        key = os.getenv(ACCESS_KEY_ID_ENV, "")
        logger.debug(f"Access key id not in URL, using ${ACCESS_KEY_ID_ENV}")

    if colon:
        secret = unquote(password)
    else:
        secret = os.getenv(ACCESS_KEY_SECRET_ENV, "")
        logger.debug(f"Access key secret not in URL, using ${ACCESS_KEY_SECRET_ENV}")

    return ClientCredentials(access_key_id=key, access_key_secret=secret, endpoint=hostport)
