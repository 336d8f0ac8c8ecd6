__all__ = ["EntryExistsAlreadyError", "EntryDoesNotExistError"]

from dataclasses import dataclass

from ._comparable import Comparable


@dataclass(frozen=True, slots=True)
class EntryExistsAlreadyError(Exception):
    entry: Comparable

    def __str__(self):
        return f"Entry {self.entry!r} does already exist in set"


@dataclass(frozen=True, slots=True)
class EntryDoesNotExistError(Exception):
    entry: Comparable

    def __str__(self):
        return f"Entry {self.entry!r} does not exist in set"
