from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from recordkeeper.logging_config import LOG_NAME


def _reset_project_logger() -> None:
    # get_logger disables propagation; restore it so pytest capture handlers never stick
    logger = logging.getLogger(LOG_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture(autouse=True)
def isolated_workdir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[Path, None, None]:
    """Run every test in its own directory with a clean project logger."""
    monkeypatch.chdir(tmp_path)
    _reset_project_logger()
    yield tmp_path
    _reset_project_logger()
