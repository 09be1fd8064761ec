"""
Basic settings and logging configuration for the cargofleet console app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cargofleet_app.models.ship import TransferPolicy


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    log_level: int = logging.INFO
    # Console only unless a file is given
    log_file: Path | None = None
    transfer_policy: TransferPolicy = TransferPolicy.RESTORE
    # Print hazard alerts on the console in addition to logging them
    echo_hazard_alerts: bool = True

    @classmethod
    def default(cls) -> "Settings":
        return cls()


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info(
        "Logging initialized. Transfer policy: %s", settings.transfer_policy.value
    )
