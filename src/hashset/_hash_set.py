from __future__ import annotations

__all__ = ["HashSet"]

from typing import AbstractSet, Iterable, Iterator, TypeVar

from returns.result import Failure, Result, Success

from ._comparable import Comparable
from ._exceptions import EntryDoesNotExistError, EntryExistsAlreadyError
from ._read_write_lock import ReadWriteLock

Element = TypeVar("Element", bound=Comparable)


class HashSet(AbstractSet[Element]):
    """A thread-safe set of elements that define their own hash code and equality.

    Elements are grouped into chains by `hash_code()`. Within a chain, `equals`
    decides uniqueness, so two elements with the same hash code can both be
    stored as long as they are not equal. Lookups scan a single chain, which
    makes the quality of the element's hash code decisive for performance.

    All reads share a single reader/writer lock and all mutations take it
    exclusively.
    """

    def __init__(self, *entries: Element):
        self._buckets: dict[int, list[Element]] = {}
        self._lock = ReadWriteLock()
        for entry in entries:
            # Duplicates among the initial entries are dropped
            _ = self.add(entry)

    @classmethod
    def _from_iterable(cls, iterable: Iterable[Element]) -> HashSet[Element]:
        return cls(*iterable)

    def add(self, entry: Element) -> Result[None, EntryExistsAlreadyError]:
        """Add an entry unless an equal entry is already present.

        Args:
            entry: The element to store

        Returns:
            `Success(None)` if the entry was stored or
            `Failure(EntryExistsAlreadyError)` if an equal entry exists, in
            which case the set is unchanged.
        """
        hash_code = entry.hash_code()
        with self._lock.write():
            chain = self._buckets.get(hash_code)
            if chain is None:
                self._buckets[hash_code] = [entry]
                return Success(None)

            for existing in chain:
                if existing.equals(entry):
                    return Failure(EntryExistsAlreadyError(entry))

            chain.append(entry)
            return Success(None)

    def remove(self, entry: Element) -> Result[None, EntryDoesNotExistError]:
        """Remove the stored entry equal to the given one.

        Args:
            entry: An element equal to the one to remove

        Returns:
            `Success(None)` if an entry was removed or
            `Failure(EntryDoesNotExistError)` if no equal entry exists, in
            which case the set is unchanged.
        """
        hash_code = entry.hash_code()
        with self._lock.write():
            chain = self._buckets.get(hash_code)
            if chain is None:
                return Failure(EntryDoesNotExistError(entry))

            for i, existing in enumerate(chain):
                if existing.equals(entry):
                    del chain[i]
                    if len(chain) == 0:
                        del self._buckets[hash_code]
                    return Success(None)

            return Failure(EntryDoesNotExistError(entry))

    def contains(self, entry: Element) -> bool:
        hash_code = entry.hash_code()
        with self._lock.read():
            chain = self._buckets.get(hash_code)
            if chain is None:
                return False
            return any(existing.equals(entry) for existing in chain)

    def is_empty(self) -> bool:
        with self._lock.read():
            return len(self._buckets) == 0

    def size(self) -> int:
        with self._lock.read():
            return sum(len(chain) for chain in self._buckets.values())

    def to_list(self) -> list[Element]:
        """Snapshot of all entries in no particular order."""
        with self._lock.read():
            return [entry for chain in self._buckets.values() for entry in chain]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, Comparable):
            return False
        return self.contains(x)

    def __iter__(self) -> Iterator[Element]:
        # Iterate a snapshot so that concurrent mutation cannot break iteration
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"HashSet({', '.join(repr(entry) for entry in self.to_list())})"
