# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Silent error reporter implementation for testing."""

import threading

from .config import DriverConfig_ErrorReporter_Silent
from .error_context import ErrorContext
from .error_reporter import ErrorReporter


class SilentReporter(ErrorReporter):
    """Silent error reporter that stores notifications in memory for testing.

    This implementation is useful for unit tests where you want to verify
    error reporting behavior without producing actual logs or side effects.
    """

    def __init__(self):
        """Initialize silent error reporter."""
        self.notifications: list[ErrorContext] = []
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: DriverConfig_ErrorReporter_Silent) -> "SilentReporter":
        """Create SilentReporter from driver configuration.

        Args:
            config: Driver config (ignored, no configuration needed)

        Returns:
            SilentReporter instance
        """
        return cls()

    def notify(self, ectx: ErrorContext) -> None:
        """Record the error context.

        Args:
            ectx: The error context to report
        """
        with self._lock:
            self.notifications.append(ectx)

    def get_errors(self, prefix: str | None = None) -> list[ErrorContext]:
        """Get all recorded notifications, optionally filtered by message prefix.

        Args:
            prefix: Optional message prefix to filter by (e.g. "panic: ")

        Returns:
            List of recorded error contexts
        """
        with self._lock:
            if prefix is not None:
                return [n for n in self.notifications if n.error.startswith(prefix)]
            return list(self.notifications)

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.notifications) > 0

    def clear(self) -> None:
        """Clear all recorded notifications."""
        with self._lock:
            self.notifications.clear()
