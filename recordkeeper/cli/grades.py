from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from recordkeeper.application.services.grading_service import StudentResultProcessor
from recordkeeper.config.settings import settings
from recordkeeper.domain.errors import (
    FormatError,
    InvalidFieldError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
)
from recordkeeper.logging_config import get_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grade student scores from a comma-separated file")
    p.add_argument(
        "--input",
        type=Path,
        default=settings.grades_input_path,
        help=f"Input file with id,name,score lines (default: {settings.grades_input_path})",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=settings.grades_report_path,
        help=f"Report file to write (default: {settings.grades_report_path})",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(settings.log_file, settings.log_level)

    processor = StudentResultProcessor()
    try:
        processor.process(args.input, args.output)
    except NotFoundError as exc:
        print(f"File not found: {exc}")
    except InvalidFieldError as exc:
        print(f"Invalid score format: {exc}")
    except MissingFieldError as exc:
        print(f"Missing field: {exc}")
    except FormatError as exc:
        print(f"Malformed input: {exc}")
    except PersistenceError as exc:
        print(f"Unexpected error: {exc}")
    else:
        print(f"Report written to {args.output}")
        return 0
    logger.error("Grading aborted", extra={"input": str(args.input)})
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
