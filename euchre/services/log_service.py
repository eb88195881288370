"""Logging service."""

import logging
import sys

from euchre.config import Settings

logger = logging.getLogger(__name__)


def setup_logging(config: Settings) -> None:
    """Configure stdout logging for the euchre package.

    Args:
        config: Settings providing level and format

    """
    logging.basicConfig(
        level=logging.INFO,
        format=config.log_format,
        datefmt=config.log_datefmt,
        stream=sys.stdout,
    )
    logging.getLogger("euchre").setLevel(config.log_level)


class LogService:
    """Service for structured logging.

    Messages are rendered as ``key=value | key=value``.
    """

    def __init__(self, name: str | None = None) -> None:
        """Initialize the service.

        Args:
            name: Logger name, defaults to this module's logger

        """
        self._logger = logging.getLogger(name) if name else logger

    @staticmethod
    def format(data: dict[str, object]) -> str:
        """Render log data as a single line."""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    def is_debug_enabled(self) -> bool:
        """Check if debug records would be emitted."""
        return self._logger.isEnabledFor(logging.DEBUG)

    def info(self, data: dict[str, object]) -> None:
        """Log info message."""
        self._logger.info(self.format(data))

    def error(self, data: dict[str, object]) -> None:
        """Log error message."""
        self._logger.error(self.format(data))

    def warning(self, data: dict[str, object]) -> None:
        """Log warning message."""
        self._logger.warning(self.format(data))

    def debug(self, data: dict[str, object]) -> None:
        """Log debug message."""
        self._logger.debug(self.format(data))
