"""
Source Driver Registry

Maps URL schemes to source driver prototypes. Host applications create a
registry at startup and register the drivers they need explicitly;
importing a driver module registers nothing.
"""

import logging
from typing import Callable
from urllib.parse import urlsplit

from ..exceptions import SourceRegistrationError
from .codeup import CodeupSource
from .driver import SourceDriver

logger = logging.getLogger(__name__)

DriverFactory = Callable[[], SourceDriver]


class SourceRegistry:
    """Registry of source driver factories keyed by URL scheme."""

    def __init__(self) -> None:
        self._factories: dict[str, DriverFactory] = {}

    def register(self, name: str, factory: DriverFactory) -> None:
        """
        Register a driver factory under a scheme name.

        Args:
            name: URL scheme the driver handles, e.g. "codeup"
            factory: Callable returning an unopened driver prototype

        Raises:
            SourceRegistrationError: If the name is empty or already taken
        """
        if not name:
            raise SourceRegistrationError("Source driver name cannot be empty")
        if factory is None:
            raise SourceRegistrationError("Source driver factory is None", name=name)
        if name in self._factories:
            raise SourceRegistrationError(f"Source driver {name!r} registered twice", name=name)

        self._factories[name] = factory
        logger.debug(f"Registered source driver {name!r}")

    def open(self, url: str) -> SourceDriver:
        """
        Open a driver for ``url`` using the driver registered for its scheme.

        Raises:
            SourceRegistrationError: If the URL has no scheme or the scheme
                has no registered driver
        """
        scheme = urlsplit(url).scheme
        if not scheme:
            raise SourceRegistrationError("Source URL has no scheme")

        factory = self._factories.get(scheme)
        if factory is None:
            raise SourceRegistrationError(
                f"Unknown source driver {scheme!r} (forgotten registration?)", name=scheme
            )

        logger.info(f"Opening {scheme!r} migration source")
        return factory().open(url)

    def names(self) -> list[str]:
        """Registered driver names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def register_codeup(registry: SourceRegistry) -> None:
    """Register the Codeup source driver under "codeup"."""
    registry.register("codeup", CodeupSource)
