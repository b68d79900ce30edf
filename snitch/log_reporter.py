# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log-based error reporter implementation."""

import logging
import sys
import traceback
from itertools import islice

from .config import DriverConfig_ErrorReporter_Log
from .error_context import ErrorContext
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)


class LogReporter(ErrorReporter):
    """Error reporter that writes errors and a call stack to the log.

    Each notification produces one ``Error: <message>`` record followed by
    up to ``stack_trace_depth`` records of the form
    ``  @ <function> in <file>:<line>``, starting at the caller of ``notify``.
    """

    def __init__(self, stack_trace_depth: int = 10, logger_name: str | None = None):
        """Initialize log reporter.

        Args:
            stack_trace_depth: Maximum number of stack frames to walk
            logger_name: Optional logger name to use (defaults to module logger)

        Raises:
            ValueError: If stack_trace_depth is negative
        """
        if stack_trace_depth < 0:
            raise ValueError(f"stack_trace_depth must be >= 0, got {stack_trace_depth}")

        self.stack_trace_depth = stack_trace_depth
        self.logger = logging.getLogger(logger_name) if logger_name else logger

    @classmethod
    def from_config(cls, config: DriverConfig_ErrorReporter_Log) -> "LogReporter":
        """Create LogReporter from driver configuration.

        Args:
            config: Driver config with stack_trace_depth and logger_name

        Returns:
            LogReporter instance
        """
        return cls(stack_trace_depth=config.stack_trace_depth, logger_name=config.logger_name)

    def notify(self, ectx: ErrorContext) -> None:
        """Log the error message followed by the caller's stack.

        Args:
            ectx: The error context to report
        """
        try:
            self.logger.error("Error: %s", ectx.error)

            # Frame 0 is notify itself
            frames = traceback.walk_stack(sys._getframe(1))
            for frame, lineno in islice(frames, self.stack_trace_depth):
                if lineno is None:
                    continue
                code = frame.f_code
                self.logger.error("  @ %s in %s:%d", code.co_name, code.co_filename, lineno)
        except Exception as e:
            print(f"LogReporter failed to log error {ectx.error!r}: {e}", file=sys.stderr, flush=True)
