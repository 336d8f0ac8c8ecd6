__all__ = ["Comparable"]

from typing import Protocol, runtime_checkable


@runtime_checkable
class Comparable(Protocol):
    """An element that can be stored in a HashSet.

    Hash codes are plain integers and may clash. When they do, `equals` decides
    whether two elements are the same. Equal elements must have equal hash
    codes, and the hash code must not change while the element is stored.
    """

    def hash_code(self) -> int: ...

    def equals(self, other: object) -> bool: ...
