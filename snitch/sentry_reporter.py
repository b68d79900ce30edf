# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sentry error reporter implementation."""

from typing import Any

import sentry_sdk

from .config import DriverConfig_ErrorReporter_Sentry
from .error_context import ErrorContext
from .error_reporter import ErrorReporter


class SentryReporter(ErrorReporter):
    """Error reporter that forwards errors to Sentry.

    The error message is captured as a Sentry message and every detail is
    attached as a string tag. Delivery, retries and transport belong to the
    Sentry client.

    Example:
        sentry_sdk.init(dsn="https://...@sentry.io/...")
        reporter = SentryReporter()
        reporter.notify(ErrorContext("disk full", {"volume": "/data"}))
    """

    def __init__(self, client: Any = None):
        """Initialize Sentry error reporter.

        Args:
            client: Object exposing ``capture_message(message, level=, tags=)``.
                Defaults to the ``sentry_sdk`` module, which uses the
                globally initialized client.
        """
        self.client = client if client is not None else sentry_sdk

    @classmethod
    def from_config(cls, config: DriverConfig_ErrorReporter_Sentry) -> "SentryReporter":
        """Create a SentryReporter from driver configuration.

        Args:
            config: Driver config with dsn and environment attributes.

        Returns:
            Configured SentryReporter instance

        Raises:
            ValueError: If no DSN is configured
        """
        if not config.dsn:
            raise ValueError("sentry error reporter requires a dsn")

        sentry_sdk.init(dsn=config.dsn, environment=config.environment)
        return cls()

    @staticmethod
    def tags_from_details(ectx: ErrorContext) -> dict[str, str]:
        """Convert error details to Sentry tags.

        Args:
            ectx: The error context

        Returns:
            Mapping of detail key to ``str(value)``
        """
        return {key: str(value) for key, value in ectx.details.items()}

    def notify(self, ectx: ErrorContext) -> None:
        """Send the error message and tags to Sentry.

        Args:
            ectx: The error context to report
        """
        self.client.capture_message(ectx.error, level="error", tags=self.tags_from_details(ectx))
