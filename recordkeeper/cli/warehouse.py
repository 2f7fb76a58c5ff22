from __future__ import annotations

import argparse
import logging
from typing import Iterable, Sequence

from recordkeeper.application.services.warehouse_service import WarehouseManager
from recordkeeper.config.settings import settings
from recordkeeper.domain.entities.inventory import ElectronicItem
from recordkeeper.domain.errors import RecordKeeperError
from recordkeeper.domain.value_objects.ids import ItemId
from recordkeeper.logging_config import get_logger

logger = logging.getLogger(__name__)


def _print_items(items: Iterable[object]) -> None:
    for item in items:
        print(item)


def _report(exc: RecordKeeperError) -> None:
    logger.warning("Operation rejected", extra={"error": type(exc).__name__, "detail": str(exc)})
    print(f"Error: {exc}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Warehouse inventory demo (electronics and groceries)")
    p.add_argument(
        "--increase",
        nargs=2,
        type=int,
        metavar=("ITEM_ID", "AMOUNT"),
        help="Increase the stock of an item after the demo",
    )
    p.add_argument(
        "--category",
        choices=("electronics", "groceries"),
        default="electronics",
        help="Inventory the --increase option applies to (default: electronics)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(settings.log_file, settings.log_level)

    manager = WarehouseManager()
    manager.seed_data()

    print("=== Grocery Items ===")
    _print_items(manager.groceries.list_all())

    print("\n=== Electronic Items ===")
    _print_items(manager.electronics.list_all())

    print("\n=== Adding Duplicate Item ===")
    try:
        tablet = ElectronicItem(
            id=ItemId(1), name="Tablet", quantity=5, brand="Apple", warranty_months=12
        )
        manager.electronics.add(tablet)
    except RecordKeeperError as exc:
        _report(exc)

    print("\n=== Removing Non-Existent Item ===")
    try:
        manager.remove_item(manager.groceries, 99)
        print("Item with ID 99 removed.")
    except RecordKeeperError as exc:
        _report(exc)

    print("\n=== Updating with Invalid Quantity ===")
    try:
        manager.electronics.update_quantity(ItemId(1), -5)
    except RecordKeeperError as exc:
        _report(exc)

    if args.increase:
        item_id, amount = args.increase
        repo = manager.electronics if args.category == "electronics" else manager.groceries
        print(f"\n=== Increasing Stock of {args.category.title()} Item {item_id} ===")
        try:
            updated = manager.increase_stock(repo, item_id, amount)
            print(f"Stock increased. New quantity: {updated.quantity}")
        except RecordKeeperError as exc:
            _report(exc)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
