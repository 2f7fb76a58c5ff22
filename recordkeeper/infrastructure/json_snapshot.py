from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..domain.errors import FormatError, NotFoundError, PersistenceError
from ..domain.value_objects.enums import SnapshotStatus

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@dataclass(frozen=True)
class SnapshotLoad(Generic[M]):
    """Outcome of :meth:`JsonSnapshotStore.try_load`.

    ``ABSENT`` means no snapshot was written yet and is an expected state;
    ``records`` is empty in that case.
    """

    status: SnapshotStatus
    records: list[M] = field(default_factory=list)

    @property
    def loaded(self) -> bool:
        return self.status is SnapshotStatus.LOADED


class JsonSnapshotStore(Generic[M]):
    """Persist a list of pydantic records as a pretty-printed JSON array.

    - Records are dumped by alias so models can map fields to external key names.
    - ``save`` writes to a temporary file in the destination directory and
      replaces the destination, so readers never observe a half-written file.
    """

    def __init__(self, path: Path | str, model: type[M], *, indent: int = 2) -> None:
        self.path = Path(path)
        self._adapter: TypeAdapter[list[M]] = TypeAdapter(list[model])  # type: ignore[valid-type]
        self._indent = indent

    def save(self, records: Sequence[M]) -> None:
        payload = self._adapter.dump_json(list(records), indent=self._indent, by_alias=True)
        directory = self.path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb", dir=directory, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as fh:
                tmp_name = fh.name
                fh.write(payload)
            # Temporary files are created 0600; saved snapshots follow the umask.
            os.chmod(tmp_name, _default_file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Error saving to file {self.path}: {exc}") from exc
        logger.info("Snapshot saved", extra={"path": str(self.path), "records": len(records)})

    def load(self) -> list[M]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"No saved file found at {self.path}.") from None
        except OSError as exc:
            raise PersistenceError(f"Error loading from file {self.path}: {exc}") from exc

        try:
            records = self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise FormatError(f"Malformed snapshot {self.path}: {exc}") from exc
        logger.info("Snapshot loaded", extra={"path": str(self.path), "records": len(records)})
        return records

    def try_load(self) -> SnapshotLoad[M]:
        """Like :meth:`load`, but report a missing file as ``ABSENT`` instead of raising."""
        try:
            return SnapshotLoad(SnapshotStatus.LOADED, self.load())
        except NotFoundError:
            logger.info("No snapshot present", extra={"path": str(self.path)})
            return SnapshotLoad(SnapshotStatus.ABSENT)
