# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Error reporter that fans notifications out to several backends."""

import logging
from typing import Iterable

from .error_context import ErrorContext
from .error_reporter import ErrorReporter
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class MultiplexingReporter(ErrorReporter):
    """Error reporter that notifies every registered reporter in turn.

    Reporters are notified in registration order and are never removed.
    ``add_reporter`` and ``notify`` may be called from any thread; concurrent
    notifications proceed in parallel, registrations are exclusive.

    A reporter that raises is logged and skipped so the remaining reporters
    are still notified.
    """

    def __init__(self, reporters: Iterable[ErrorReporter] | None = None):
        """Initialize multiplexing reporter.

        Args:
            reporters: Optional initial reporters, in notification order
        """
        self._reporters: list[ErrorReporter] = list(reporters or [])
        self._lock = ReadWriteLock()

    def add_reporter(self, reporter: ErrorReporter) -> None:
        """Register a reporter at the end of the notification order.

        Args:
            reporter: The reporter to add
        """
        with self._lock.write_locked():
            self._reporters.append(reporter)

    @property
    def reporters(self) -> tuple[ErrorReporter, ...]:
        """Snapshot of the registered reporters."""
        with self._lock.read_locked():
            return tuple(self._reporters)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._reporters)

    def notify(self, ectx: ErrorContext) -> None:
        """Notify every registered reporter.

        Args:
            ectx: The error context to report
        """
        with self._lock.read_locked():
            for reporter in self._reporters:
                try:
                    reporter.notify(ectx)
                except Exception:
                    logger.exception(
                        f"Error reporter {type(reporter).__name__} failed to notify: {ectx.error}"
                    )
