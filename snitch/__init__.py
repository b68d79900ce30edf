# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Snitch error notification library.

Captures application errors and unhandled exceptions and forwards them to
one or more reporting backends (log, Sentry, in-memory).

Example:
    >>> from snitch import LogReporter, MultiplexingReporter, PanicMonitor
    >>>
    >>> reporter = MultiplexingReporter()
    >>> reporter.add_reporter(LogReporter(stack_trace_depth=5))
    >>>
    >>> with PanicMonitor(reporter):
    ...     run_job()
"""

from .config import (
    AdapterConfig_ErrorReporter,
    DriverConfig_ErrorReporter_Log,
    DriverConfig_ErrorReporter_Sentry,
    DriverConfig_ErrorReporter_Silent,
    _DriverConfig,
    load_error_reporter_config,
)
from .error_context import ErrorContext, ErrorDetails, new_error_details
from .error_reporter import ErrorReporter
from .log_reporter import LogReporter
from .multiplexing_reporter import MultiplexingReporter
from .panic_monitor import PanicMonitor
from .silent_reporter import SilentReporter

__version__ = "0.1.0"


def _build_log(config: _DriverConfig) -> ErrorReporter:
    if not isinstance(config, DriverConfig_ErrorReporter_Log):
        raise TypeError("driver config must be DriverConfig_ErrorReporter_Log")
    return LogReporter.from_config(config)


def _build_silent(config: _DriverConfig) -> ErrorReporter:
    if not isinstance(config, DriverConfig_ErrorReporter_Silent):
        raise TypeError("driver config must be DriverConfig_ErrorReporter_Silent")
    return SilentReporter.from_config(config)


def _build_sentry(config: _DriverConfig) -> ErrorReporter:
    from .sentry_reporter import SentryReporter

    if not isinstance(config, DriverConfig_ErrorReporter_Sentry):
        raise TypeError("driver config must be DriverConfig_ErrorReporter_Sentry")
    return SentryReporter.from_config(config)


_DRIVERS = {
    "log": _build_log,
    "silent": _build_silent,
    "sentry": _build_sentry,
}


def create_error_reporter(config: AdapterConfig_ErrorReporter) -> ErrorReporter:
    """Create an error reporter from typed configuration.

    Args:
        config: Typed adapter configuration for error_reporter.

    Returns:
        ErrorReporter instance.

    Raises:
        ValueError: If config is missing or error_reporter_type is not recognized.
        TypeError: If the driver config does not match error_reporter_type.
    """
    if config is None:
        raise ValueError("error_reporter config is required")

    driver_type = str(config.error_reporter_type).strip().lower()
    build = _DRIVERS.get(driver_type)
    if build is None:
        supported = ", ".join(sorted(_DRIVERS))
        raise ValueError(
            f"Unknown error_reporter driver: {driver_type}. Supported drivers: {supported}"
        )
    return build(config.driver)


def create_error_reporter_from_env() -> ErrorReporter:
    """Create the error reporter(s) named by environment variables.

    Returns:
        The single configured reporter, or a MultiplexingReporter notifying
        every configured reporter in the order they were listed.
    """
    reporters = [create_error_reporter(config) for config in load_error_reporter_config()]
    if len(reporters) == 1:
        return reporters[0]
    return MultiplexingReporter(reporters)


__all__ = [
    # Version
    "__version__",
    # Data
    "ErrorContext",
    "ErrorDetails",
    "new_error_details",
    # Error Reporters
    "ErrorReporter",
    "LogReporter",
    "MultiplexingReporter",
    "SilentReporter",
    "PanicMonitor",
    # Configuration
    "AdapterConfig_ErrorReporter",
    "DriverConfig_ErrorReporter_Log",
    "DriverConfig_ErrorReporter_Sentry",
    "DriverConfig_ErrorReporter_Silent",
    "create_error_reporter",
    "create_error_reporter_from_env",
    "load_error_reporter_config",
]
