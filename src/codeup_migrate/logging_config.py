"""
Logging Configuration
"""

import logging

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """
    Configure root logging for command line use.

    Args:
        level: Level name used when not verbose
        verbose: Log everything at DEBUG

    Raises:
        ConfigurationError: If the level name is not a logging level
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level}", config_key="level")

    logging.basicConfig(
        level=logging.DEBUG if verbose else numeric_level,
        format=LOG_FORMAT,
        force=True,
    )

    # Vendor SDK request logging is noisy below WARNING
    logging.getLogger("urllib3").setLevel(logging.WARNING)
