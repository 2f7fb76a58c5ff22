from __future__ import annotations

import logging
from operator import attrgetter
from typing import Callable, Dict, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from ...domain.errors import DuplicateKeyError, InvalidValueError, NotFoundError
from ..keyed import K, KeyedRepo, QuantityRepo, V

logger = logging.getLogger(__name__)


Q = TypeVar("Q", bound=BaseModel)


class InMemoryKeyedRepo(KeyedRepo[K, V]):
    """Dict backed implementation of :class:`KeyedRepo`.

    Keys are read from each record with ``key_of`` (the ``id`` attribute by
    default). Python dicts keep insertion order, which ``list_all`` preserves.
    """

    def __init__(
        self,
        key_of: Optional[Callable[[V], K]] = None,
        records: Iterable[V] = (),
    ) -> None:
        self._key_of: Callable[[V], K] = key_of or attrgetter("id")
        self._items: Dict[K, V] = {}
        for record in records:
            self.add(record)

    def add(self, record: V) -> None:
        key = self._key_of(record)
        if key in self._items:
            raise DuplicateKeyError(key)
        self._items[key] = record
        logger.debug("Record added", extra={"key": key})

    def get_by_id(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError.for_key(key) from None

    def remove(self, key: K) -> None:
        if key not in self._items:
            raise NotFoundError.for_key(key)
        del self._items[key]
        logger.debug("Record removed", extra={"key": key})

    def list_all(self) -> list[V]:
        return list(self._items.values())

    def contains(self, key: K) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class InMemoryQuantityRepo(InMemoryKeyedRepo[K, Q], QuantityRepo[K, Q]):
    """In-memory repository of frozen pydantic records with a ``quantity`` field.

    Records are immutable, so ``get_by_id`` hands out values that cannot bypass
    :meth:`update_quantity`; an update stores a re-validated copy under the same key.
    """

    def update_quantity(self, key: K, new_quantity: int) -> Q:
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            raise InvalidValueError(f"Quantity must be an integer, got {new_quantity!r}.")
        if new_quantity < 0:
            raise InvalidValueError("Quantity cannot be negative.")
        current = self.get_by_id(key)
        try:
            updated = type(current).model_validate(
                {**current.model_dump(), "quantity": new_quantity}
            )
        except ValidationError as exc:
            raise InvalidValueError(f"Quantity {new_quantity} rejected: {exc}") from exc
        self._items[key] = updated
        logger.debug("Quantity updated", extra={"key": key, "quantity": new_quantity})
        return updated
