# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Report unhandled exceptions without swallowing them."""

import functools
import inspect
import logging
from contextlib import ContextDecorator
from types import TracebackType
from typing import Callable

from .error_context import ErrorContext
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

PANIC_PREFIX = "panic: "


class PanicMonitor(ContextDecorator):
    """Guard a scope and report any exception escaping it.

    The exception is reported as ``panic: <exception>`` and then keeps
    propagating unchanged. Usable as a context manager or a decorator:

        with PanicMonitor(reporter):
            handle_job()

        @PanicMonitor(reporter)
        def handle_job():
            ...

        @PanicMonitor(reporter)
        async def handle_request():
            ...

    Only ``Exception`` subclasses are reported; ``KeyboardInterrupt``,
    ``SystemExit`` and ``GeneratorExit`` pass through silently.
    """

    def __init__(self, error_reporter: ErrorReporter | None):
        """Initialize panic monitor.

        Args:
            error_reporter: Reporter to notify, or None to only re-raise
        """
        self.error_reporter = error_reporter

    def __call__(self, func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            # Guard the awaited body, not just coroutine creation
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                with self:
                    return await func(*args, **kwargs)

            return async_wrapper
        return super().__call__(func)

    def __enter__(self) -> "PanicMonitor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool:
        if isinstance(exc_value, Exception) and self.error_reporter is not None:
            try:
                self.error_reporter.notify(ErrorContext(error=f"{PANIC_PREFIX}{exc_value}"))
            except Exception:
                logger.exception(f"Failed to report panic: {exc_value}")

        # Never suppress
        return False
