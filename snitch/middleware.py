# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""ASGI middleware reporting unhandled request exceptions.

The middleware observes exceptions raised while handling a request, including
those raised while a streaming response body is being produced, notifies an
ErrorReporter once per failing request and lets the exception continue to the
outer server stack, which is responsible for turning it into a response.
"""

from starlette.types import ASGIApp, Receive, Scope, Send

from .error_reporter import ErrorReporter
from .panic_monitor import PanicMonitor


class PanicMonitorMiddleware:
    """Middleware that reports request-handling panics.

    Only ``http`` scopes are monitored; lifespan and websocket scopes are
    passed straight through.

    Attributes:
        app: Next ASGI application in the chain
        error_reporter: Reporter notified on unhandled exceptions (may be None)
    """

    def __init__(self, app: ASGIApp, error_reporter: ErrorReporter | None = None):
        """Initialize panic monitor middleware.

        Args:
            app: Next ASGI application in the chain
            error_reporter: Reporter to notify on unhandled exceptions
        """
        self.app = app
        self.error_reporter = error_reporter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        with PanicMonitor(self.error_reporter):
            await self.app(scope, receive, send)


def panic_monitor_handler(error_reporter: ErrorReporter | None, app: ASGIApp) -> ASGIApp:
    """Wrap an ASGI app so that request-handling panics are reported.

    Args:
        error_reporter: Reporter to notify on unhandled exceptions
        app: The ASGI app to protect

    Returns:
        The wrapped ASGI app

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(PanicMonitorMiddleware, error_reporter=reporter)
        >>> # or, composing by hand
        >>> wrapped = panic_monitor_handler(reporter, app)
    """
    return PanicMonitorMiddleware(app, error_reporter=error_reporter)
