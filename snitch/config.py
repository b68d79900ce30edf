# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Typed configuration for error reporter drivers.

Each driver has a small dataclass config; ``AdapterConfig_ErrorReporter``
pairs one of them with the discriminant used by ``create_error_reporter``.
``load_error_reporter_config`` reads these from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import TypeAlias

DEFAULT_STACK_TRACE_DEPTH = 10


@dataclass
class DriverConfig_ErrorReporter_Log:
    """Configuration for the log driver."""

    stack_trace_depth: int = DEFAULT_STACK_TRACE_DEPTH
    logger_name: str | None = None


@dataclass
class DriverConfig_ErrorReporter_Sentry:
    """Configuration for the sentry driver."""

    dsn: str | None = None
    environment: str = "production"


@dataclass
class DriverConfig_ErrorReporter_Silent:
    """Configuration for the silent driver (no options)."""


_DriverConfig: TypeAlias = (
    DriverConfig_ErrorReporter_Log
    | DriverConfig_ErrorReporter_Sentry
    | DriverConfig_ErrorReporter_Silent
)


@dataclass
class AdapterConfig_ErrorReporter:
    """Adapter configuration for a single error reporter.

    Attributes:
        error_reporter_type: Driver discriminant (log, sentry, silent)
        driver: Typed driver configuration matching error_reporter_type
    """

    error_reporter_type: str
    driver: _DriverConfig = field(default_factory=DriverConfig_ErrorReporter_Silent)


def _default(env_var: str, fallback: str | None) -> str | None:
    """Helper to pick an env var value, then fallback."""
    return os.getenv(env_var) or fallback


def _load_driver_config(reporter_type: str) -> _DriverConfig:
    if reporter_type == "log":
        raw_depth = _default("ERROR_REPORTER_STACK_DEPTH", str(DEFAULT_STACK_TRACE_DEPTH))
        try:
            depth = int(raw_depth)
        except ValueError as exc:
            raise ValueError(
                f"ERROR_REPORTER_STACK_DEPTH must be an integer, got {raw_depth!r}"
            ) from exc
        return DriverConfig_ErrorReporter_Log(
            stack_trace_depth=depth,
            logger_name=_default("ERROR_REPORTER_LOGGER_NAME", None),
        )
    if reporter_type == "sentry":
        return DriverConfig_ErrorReporter_Sentry(
            dsn=_default("SENTRY_DSN", None),
            environment=_default("SENTRY_ENVIRONMENT", "production"),
        )
    # Unknown types are rejected later by create_error_reporter
    return DriverConfig_ErrorReporter_Silent()


def load_error_reporter_config() -> list[AdapterConfig_ErrorReporter]:
    """Load error reporter configs from environment variables.

    ``ERROR_REPORTER_TYPE`` holds one or more comma-separated driver names
    and defaults to ``log``.

    Returns:
        One AdapterConfig_ErrorReporter per configured driver, in order
    """
    raw_types = _default("ERROR_REPORTER_TYPE", "log")
    reporter_types = [t.strip().lower() for t in raw_types.split(",") if t.strip()]

    return [
        AdapterConfig_ErrorReporter(
            error_reporter_type=reporter_type,
            driver=_load_driver_config(reporter_type),
        )
        for reporter_type in reporter_types
    ]
