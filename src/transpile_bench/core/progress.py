"""Progress observers injected into the generator, runner and session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import structlog
from structlog.stdlib import BoundLogger


class ProgressReporter(Protocol):
    """Minimal progress reporting interface."""

    def update(self, message: str, *, percentage: int | None = None) -> None:
        """Receives a progress notification."""


@dataclass
class DefaultProgressReporter:
    """Logs progress events through structlog."""

    logger: BoundLogger = field(default_factory=lambda: structlog.get_logger(__name__))

    def update(self, message: str, *, percentage: int | None = None) -> None:
        if percentage is not None:
            self.logger.info("progress", message=message, percentage=percentage)
        else:
            self.logger.info("progress", message=message)


class NullProgressReporter:
    """Discards progress notifications."""

    def update(self, message: str, *, percentage: int | None = None) -> None:
        return None
