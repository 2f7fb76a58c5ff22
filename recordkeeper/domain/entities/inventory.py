from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import ItemId


class InventoryItem(BaseModel):
    """Common shape of every stock-keeping record: an identifier and a quantity."""

    id: ItemId = Field(..., description="Unique identifier within its repository")
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class ElectronicItem(InventoryItem):
    brand: str
    warranty_months: int = Field(..., ge=0)

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Warranty: {self.warranty_months} months, Qty: {self.quantity}"
        )


class GroceryItem(InventoryItem):
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, Name: {self.name}, "
            f"Expiry: {self.expiry_date.isoformat()}, Qty: {self.quantity}"
        )


class LoggedItem(BaseModel):
    """Inventory record persisted by the JSON logger.

    Serialized with the ``Id``/``Name``/``Quantity``/``DateAdded`` keys of the
    snapshot format; Python code uses the snake_case field names.
    """

    id: ItemId = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    quantity: int = Field(..., alias="Quantity")
    date_added: datetime = Field(..., alias="DateAdded")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Date Added: {self.date_added.isoformat(sep=' ', timespec='seconds')}"
        )
