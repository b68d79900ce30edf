# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Error context passed to error reporters."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

ErrorDetails = dict[str, Any]


def new_error_details() -> ErrorDetails:
    """Create a new, empty ErrorDetails mapping."""
    return {}


@dataclass(frozen=True)
class ErrorContext:
    """Describes one error event for reporting to an ErrorReporter.

    Attributes:
        error: Human-readable error message. Treated as opaque text.
        details: Free-form annotations. Values may be of any type; each
            reporter converts them to its own representation.
    """

    error: str
    details: Mapping[str, Any] = field(default_factory=new_error_details, hash=False)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict are not visible here
        object.__setattr__(self, "details", MappingProxyType(dict(self.details or {})))

    @classmethod
    def from_exception(
        cls, error: BaseException, details: Mapping[str, Any] | None = None
    ) -> "ErrorContext":
        """Build an ErrorContext from an exception.

        Args:
            error: The exception to describe
            details: Optional annotations; ``error_type`` is added unless present

        Returns:
            ErrorContext whose message is ``str(error)``
        """
        merged: ErrorDetails = {"error_type": type(error).__name__}
        merged.update(details or {})
        return cls(error=str(error), details=merged)
