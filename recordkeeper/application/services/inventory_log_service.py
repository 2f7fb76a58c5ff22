from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from recordkeeper.domain.entities.inventory import LoggedItem
from recordkeeper.domain.errors import DuplicateKeyError, FormatError
from recordkeeper.domain.value_objects.enums import SnapshotStatus
from recordkeeper.domain.value_objects.ids import ItemId
from recordkeeper.infrastructure.json_snapshot import JsonSnapshotStore, SnapshotLoad
from recordkeeper.repositories.memory import InMemoryKeyedRepo

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class InventoryLogger(Generic[M]):
    """In-memory log of records backed by a JSON snapshot file."""

    def __init__(self, file_path: Path | str, model: type[M]) -> None:
        self._store: JsonSnapshotStore[M] = JsonSnapshotStore(file_path, model)
        self._log: InMemoryKeyedRepo[object, M] = InMemoryKeyedRepo()

    @property
    def file_path(self) -> Path:
        return self._store.path

    def add(self, item: M) -> None:
        self._log.add(item)

    def get_all(self) -> list[M]:
        return self._log.list_all()

    def save_to_file(self) -> None:
        """Raises ``PersistenceError`` when the snapshot cannot be written."""
        self._store.save(self._log.list_all())

    def load_from_file(self) -> SnapshotLoad[M]:
        """Replace the in-memory log with the snapshot contents.

        A missing snapshot leaves the log untouched and reports ``ABSENT``;
        malformed content or repeated IDs raise ``FormatError``.
        """
        outcome = self._store.try_load()
        if outcome.status is SnapshotStatus.LOADED:
            try:
                self._log = InMemoryKeyedRepo(records=outcome.records)
            except DuplicateKeyError as exc:
                raise FormatError(f"Snapshot {self.file_path} repeats an ID: {exc}") from exc
        return outcome


class InventoryApp:
    def __init__(self, file_path: Path | str) -> None:
        self.logger: InventoryLogger[LoggedItem] = InventoryLogger(file_path, LoggedItem)

    def seed_sample_data(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.now()
        for item_id, name, quantity in (
            (1, "Laptop", 5),
            (2, "Mouse", 15),
            (3, "Keyboard", 10),
            (4, "Monitor", 7),
        ):
            self.logger.add(
                LoggedItem(id=ItemId(item_id), name=name, quantity=quantity, date_added=now)
            )

    def save_data(self) -> None:
        self.logger.save_to_file()

    def load_data(self) -> SnapshotLoad[LoggedItem]:
        return self.logger.load_from_file()

    def items(self) -> list[LoggedItem]:
        return self.logger.get_all()
