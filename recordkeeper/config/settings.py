"""Application settings for the recordkeeper console programs.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through an immutable Pydantic settings object. Every value has a
default, so the programs run without any configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
ENV_PREFIX = "RECORDKEEPER_"
DEFAULT_INVENTORY_FILE = "inventory.json"
DEFAULT_GRADES_INPUT = "students_input.txt"
DEFAULT_GRADES_REPORT = "students_report.txt"
DEFAULT_LOG_FILE = "logs/app.log"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    data_dir: Path = Path(".")
    inventory_file: Path = Path(DEFAULT_INVENTORY_FILE)
    grades_input: Path = Path(DEFAULT_GRADES_INPUT)
    grades_report: Path = Path(DEFAULT_GRADES_REPORT)
    log_file: Path = Path(DEFAULT_LOG_FILE)
    log_level: str = "INFO"
    currency: Literal["HUF", "EUR", "USD"] = "USD"

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at ``data_dir`` unless it is absolute."""
        return path if path.is_absolute() else self.data_dir / path

    @property
    def inventory_path(self) -> Path:
        return self.resolve(self.inventory_file)

    @property
    def grades_input_path(self) -> Path:
        return self.resolve(self.grades_input)

    @property
    def grades_report_path(self) -> Path:
        return self.resolve(self.grades_report)


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    try:
        return Settings(
            data_dir=Path(_env("DATA_DIR", ".")),
            inventory_file=Path(_env("INVENTORY_FILE", DEFAULT_INVENTORY_FILE)),
            grades_input=Path(_env("GRADES_INPUT", DEFAULT_GRADES_INPUT)),
            grades_report=Path(_env("GRADES_REPORT", DEFAULT_GRADES_REPORT)),
            log_file=Path(_env("LOG_FILE", DEFAULT_LOG_FILE)),
            log_level=_env("LOG_LEVEL", "INFO"),
            currency=_env("CURRENCY", "USD").upper(),  # type: ignore[arg-type]
        )
    except ValidationError as exc:
        raise RuntimeError(f"Invalid recordkeeper configuration: {exc}") from exc


# Public settings instance
settings = _build_settings()
