__all__ = ["ReadWriteLock"]

from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator


class ReadWriteLock:
    """A lock held by any number of readers or by a single writer, never both.

    Readers only wait for a writer that already holds the lock, so a steady
    stream of readers can delay a waiting writer.
    """

    __slots__ = ("_condition", "_readers", "_writer")

    def __init__(self):
        self._condition = Condition(Lock())
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        with self._condition:
            return self._readers

    @property
    def writing(self) -> bool:
        with self._condition:
            return self._writer

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers <= 0:
                raise RuntimeError("Cannot release a read lock that was not acquired")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            while self._writer or self._readers > 0:
                self._condition.wait()
            self._writer = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer:
                raise RuntimeError("Cannot release a write lock that was not acquired")
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
