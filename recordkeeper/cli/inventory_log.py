from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from recordkeeper.application.services.inventory_log_service import InventoryApp
from recordkeeper.config.settings import settings
from recordkeeper.domain.errors import FormatError, PersistenceError
from recordkeeper.logging_config import get_logger


def _print_all_items(app: InventoryApp) -> None:
    items = app.items()
    if not items:
        print("No inventory data found.")
        return
    for item in items:
        print(item)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Save sample inventory to JSON and reload it")
    p.add_argument(
        "--file",
        type=Path,
        default=settings.inventory_path,
        help=f"JSON snapshot path (default: {settings.inventory_path})",
    )
    p.add_argument(
        "--load-only",
        action="store_true",
        help="Skip seeding and saving; only load and print the existing snapshot",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(settings.log_file, settings.log_level)

    if not args.load_only:
        # First session: create, seed, save
        app = InventoryApp(args.file)
        app.seed_sample_data()
        try:
            app.save_data()
        except PersistenceError as exc:
            print(f"Error saving to file: {exc}")
            return 1
        print("Data saved successfully.")
        print("\n--- Simulating New Session ---\n")

    new_app = InventoryApp(args.file)
    try:
        outcome = new_app.load_data()
    except (FormatError, PersistenceError) as exc:
        print(f"Error loading from file: {exc}")
        return 1
    print("Data loaded successfully." if outcome.loaded else "No saved file found.")
    _print_all_items(new_app)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
