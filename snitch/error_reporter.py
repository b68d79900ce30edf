# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract error reporter interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from .error_context import ErrorContext


class ErrorReporter(ABC):
    """Abstract base class for error reporting backends.

    Any backend (log, Sentry, in-memory, fan-out) is integrated by
    implementing ``notify``.
    """

    @abstractmethod
    def notify(self, ectx: ErrorContext) -> None:
        """Notify the backend of an error.

        Args:
            ectx: The error context to report
        """
        pass

    def report(self, error: BaseException, details: Mapping[str, Any] | None = None) -> None:
        """Report an exception with optional details.

        Args:
            error: The exception to report
            details: Optional dictionary with additional context
        """
        self.notify(ErrorContext.from_exception(error, details))
