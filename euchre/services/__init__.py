"""Supporting services."""

from euchre.services.log_service import LogService, setup_logging

__all__ = ["LogService", "setup_logging"]
