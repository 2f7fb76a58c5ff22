from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..value_objects.ids import TransactionId
from ..value_objects.money import Money


class Transaction(BaseModel):
    id: TransactionId
    date: datetime
    amount: Money
    category: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("amount")
    @classmethod
    def _check_positive(cls, v: Money) -> Money:
        if v.amount <= 0:
            raise ValueError("Transaction amount must be positive")
        return v
