# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for ReadWriteLock."""

import threading
import time

from snitch.rwlock import ReadWriteLock


def _start(target) -> tuple[threading.Thread, threading.Event]:
    done = threading.Event()

    def run():
        target()
        done.set()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread, done


class TestReadWriteLock:
    """Tests for reader/writer exclusion."""

    def test_readers_share_lock(self):
        """Test that a second reader is admitted while one holds the lock."""
        lock = ReadWriteLock()
        lock.acquire_read()

        def read():
            with lock.read_locked():
                pass

        thread, done = _start(read)

        assert done.wait(timeout=2)
        lock.release_read()
        thread.join(timeout=2)

    def test_writer_waits_for_reader(self):
        """Test that a writer blocks until readers release."""
        lock = ReadWriteLock()
        lock.acquire_read()

        def write():
            with lock.write_locked():
                pass

        thread, done = _start(write)

        assert not done.wait(timeout=0.2)
        lock.release_read()
        assert done.wait(timeout=2)
        thread.join(timeout=2)

    def test_reader_waits_for_writer(self):
        """Test that a reader blocks while a writer holds the lock."""
        lock = ReadWriteLock()
        lock.acquire_write()

        def read():
            with lock.read_locked():
                pass

        thread, done = _start(read)

        assert not done.wait(timeout=0.2)
        lock.release_write()
        assert done.wait(timeout=2)
        thread.join(timeout=2)

    def test_waiting_writer_blocks_new_readers(self):
        """Test that new readers queue behind a waiting writer."""
        lock = ReadWriteLock()
        lock.acquire_read()
        order: list[str] = []

        def write():
            with lock.write_locked():
                order.append("writer")

        writer, writer_done = _start(write)
        # Wait until the writer is queued
        for _ in range(200):
            if lock._writers_waiting:
                break
            time.sleep(0.01)

        def read():
            with lock.read_locked():
                order.append("reader")

        reader, reader_done = _start(read)

        assert not reader_done.wait(timeout=0.2)
        lock.release_read()
        assert writer_done.wait(timeout=2)
        assert reader_done.wait(timeout=2)
        assert order == ["writer", "reader"]

    def test_lock_released_on_exception(self):
        """Test that context managers release the lock when the block raises."""
        lock = ReadWriteLock()

        try:
            with lock.write_locked():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        with lock.read_locked():
            pass
        assert lock._readers == 0
        assert not lock._writer
