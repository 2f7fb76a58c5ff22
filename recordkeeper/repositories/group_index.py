from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, List, TypeVar

FK = TypeVar("FK")
V = TypeVar("V")


class GroupIndex(Generic[FK, V]):
    """Secondary one-to-many index from a foreign key to dependent records.

    - Derived data only: ``rebuild`` discards the previous contents and scans the
      whole source collection, so each rebuild costs O(n).
    - ``lookup`` never fails; a key without dependents yields an empty list.
    """

    def __init__(self, foreign_key: Callable[[V], FK]) -> None:
        self._foreign_key = foreign_key
        self._groups: Dict[FK, List[V]] = {}

    def rebuild(self, source: Iterable[V]) -> None:
        self._groups.clear()
        for record in source:
            self._groups.setdefault(self._foreign_key(record), []).append(record)

    def lookup(self, key: FK) -> list[V]:
        return list(self._groups.get(key, ()))

    def keys(self) -> list[FK]:
        return list(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
