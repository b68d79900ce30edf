# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for snitch tests."""

import threading

import pytest

from snitch import ErrorContext, ErrorReporter, SilentReporter


class RecordingReporter(ErrorReporter):
    """Reporter that records messages and appends its name to a shared call log."""

    def __init__(self, name: str, call_log: list[str] | None = None):
        self.name = name
        self.call_log = call_log if call_log is not None else []
        self.messages: list[str] = []
        self._lock = threading.Lock()

    def notify(self, ectx: ErrorContext) -> None:
        with self._lock:
            self.messages.append(ectx.error)
            self.call_log.append(self.name)


class FailingReporter(ErrorReporter):
    """Reporter whose notify always raises."""

    def __init__(self):
        self.calls = 0

    def notify(self, ectx: ErrorContext) -> None:
        self.calls += 1
        raise RuntimeError("reporter backend down")


@pytest.fixture
def silent_reporter():
    """Create an in-memory reporter."""
    return SilentReporter()


@pytest.fixture
def failing_reporter():
    """Create a reporter that always raises."""
    return FailingReporter()


@pytest.fixture
def make_recording_reporter():
    """Factory for reporters that record what they were notified of."""
    return RecordingReporter
