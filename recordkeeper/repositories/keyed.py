from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KeyedRepo(ABC, Generic[K, V]):
    """Repository interface for records addressed by a unique key."""

    @abstractmethod
    def add(self, record: V) -> None:
        """
        Store a new record.

        :raises DuplicateKeyError: if a record with the same key is stored.
        """

    @abstractmethod
    def get_by_id(self, key: K) -> V:
        """
        Fetch a record by key.

        :raises NotFoundError: if no record has ``key``.
        """

    @abstractmethod
    def remove(self, key: K) -> None:
        """
        Delete a record by key.

        :raises NotFoundError: if no record has ``key``.
        """

    @abstractmethod
    def list_all(self) -> list[V]:
        """Return a new list with every stored record in insertion order."""

    @abstractmethod
    def contains(self, key: K) -> bool:
        """Return whether a record with ``key`` is stored."""

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]


class QuantityRepo(KeyedRepo[K, V]):
    """Keyed repository whose records carry a non-negative ``quantity``."""

    @abstractmethod
    def update_quantity(self, key: K, new_quantity: int) -> V:
        """
        Overwrite the quantity of a stored record and return the updated record.

        Example:
            >>> repo.update_quantity(1, 12)
            ElectronicItem(id=1, name='Laptop', quantity=12, ...)

        :raises InvalidValueError: if ``new_quantity`` is negative; nothing is changed.
        :raises NotFoundError: if no record has ``key``.
        """
