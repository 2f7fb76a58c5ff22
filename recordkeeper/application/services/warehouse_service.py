from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, TypeVar

from recordkeeper.domain.entities.inventory import ElectronicItem, GroceryItem, InventoryItem
from recordkeeper.domain.value_objects.ids import ItemId
from recordkeeper.repositories.memory import InMemoryQuantityRepo

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=InventoryItem)


class WarehouseManager:
    """Keeps separate electronics and groceries stock, each in its own repository.

    Operations raise the repository errors unchanged; callers decide whether to
    report and continue.
    """

    def __init__(
        self,
        electronics: Optional[InMemoryQuantityRepo[ItemId, ElectronicItem]] = None,
        groceries: Optional[InMemoryQuantityRepo[ItemId, GroceryItem]] = None,
    ) -> None:
        self.electronics = electronics if electronics is not None else InMemoryQuantityRepo()
        self.groceries = groceries if groceries is not None else InMemoryQuantityRepo()

    def seed_data(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        for item_id, name, quantity, brand, warranty in (
            (1, "Laptop", 10, "Dell", 24),
            (2, "Smartphone", 15, "Samsung", 12),
            (3, "Headphones", 25, "Sony", 6),
        ):
            self.electronics.add(
                ElectronicItem(
                    id=ItemId(item_id),
                    name=name,
                    quantity=quantity,
                    brand=brand,
                    warranty_months=warranty,
                )
            )

        for item_id, name, quantity, shelf_days in (
            (1, "Milk", 20, 10),
            (2, "Bread", 30, 3),
            (3, "Eggs", 50, 7),
        ):
            self.groceries.add(
                GroceryItem(
                    id=ItemId(item_id),
                    name=name,
                    quantity=quantity,
                    expiry_date=today + timedelta(days=shelf_days),
                )
            )
        logger.info(
            "Warehouse seeded",
            extra={"electronics": len(self.electronics), "groceries": len(self.groceries)},
        )

    def increase_stock(self, repo: InMemoryQuantityRepo[ItemId, T], item_id: int, amount: int) -> T:
        """Add ``amount`` to the stored quantity and return the updated item."""
        item = repo.get_by_id(ItemId(item_id))
        updated = repo.update_quantity(ItemId(item_id), item.quantity + amount)
        logger.info("Stock increased", extra={"item_id": item_id, "quantity": updated.quantity})
        return updated

    def remove_item(self, repo: InMemoryQuantityRepo[ItemId, T], item_id: int) -> None:
        repo.remove(ItemId(item_id))
        logger.info("Item removed", extra={"item_id": item_id})
