from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Literal, Optional

from recordkeeper.domain.entities.transaction import Transaction
from recordkeeper.domain.errors import InsufficientFundsError
from recordkeeper.domain.value_objects.enums import ProcessorKind
from recordkeeper.domain.value_objects.ids import TransactionId
from recordkeeper.domain.value_objects.money import Money
from recordkeeper.repositories.memory import InMemoryKeyedRepo

logger = logging.getLogger(__name__)


class TransactionProcessor(ABC):
    """Channel through which a transaction is paid."""

    kind: ProcessorKind

    @abstractmethod
    def process(self, transaction: Transaction) -> str:
        """Process ``transaction`` and return a confirmation line."""


class _LabelledProcessor(TransactionProcessor):
    def process(self, transaction: Transaction) -> str:
        logger.info(
            "Transaction processed",
            extra={"transaction_id": transaction.id, "channel": self.kind.value},
        )
        return (
            f"[{self.kind.value}] Processed: {transaction.amount} for {transaction.category}"
        )


class BankTransferProcessor(_LabelledProcessor):
    kind = ProcessorKind.BANK_TRANSFER


class MobileMoneyProcessor(_LabelledProcessor):
    kind = ProcessorKind.MOBILE_MONEY


class CryptoWalletProcessor(_LabelledProcessor):
    kind = ProcessorKind.CRYPTO_WALLET


class Account:
    """Account whose balance goes down with every applied transaction."""

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        self.account_number = account_number
        self._balance = initial_balance

    @property
    def balance(self) -> Money:
        return self._balance

    def confirmations(self, transaction: Transaction) -> list[str]:
        """Console lines reporting an applied transaction."""
        return [f"[Account] Deducted {transaction.amount}. New Balance: {self.balance}"]

    def apply_transaction(self, transaction: Transaction) -> Money:
        """Deduct the transaction amount and return the new balance."""
        self._balance = self._balance - transaction.amount
        logger.info(
            "Transaction applied",
            extra={"account": self.account_number, "balance": str(self._balance.amount)},
        )
        return self._balance


class SavingsAccount(Account):
    """Account that never goes below zero."""

    def apply_transaction(self, transaction: Transaction) -> Money:
        if transaction.amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient funds for {transaction.category} ({transaction.amount}). "
                f"Balance: {self.balance}"
            )
        return super().apply_transaction(transaction)

    def confirmations(self, transaction: Transaction) -> list[str]:
        return super().confirmations(transaction) + [
            f"[SavingsAccount] Transaction applied. New Balance: {self.balance}"
        ]


class FinanceApp:
    """Processes a fixed batch of sample transactions against a savings account."""

    def __init__(self, currency: Literal["HUF", "EUR", "USD"] = "USD") -> None:
        self.currency = currency
        self.transactions: InMemoryKeyedRepo[TransactionId, Transaction] = InMemoryKeyedRepo()
        self.account: Optional[Account] = None

    def _money(self, amount: int) -> Money:
        return Money(amount=amount, currency=self.currency)

    def run(self, now: Optional[datetime] = None) -> list[str]:
        """Run the simulation on a fresh account and return the console lines it produced."""
        now = now or datetime.now()
        account = SavingsAccount("ACC12345", self._money(1000))
        self.account = account
        self.transactions = InMemoryKeyedRepo()

        batch: list[tuple[Transaction, TransactionProcessor]] = []
        for tx_id, amount, category, processor in (
            (1, 150, "Groceries", MobileMoneyProcessor()),
            (2, 300, "Utilities", BankTransferProcessor()),
            (3, 200, "Entertainment", CryptoWalletProcessor()),
        ):
            tx = Transaction(
                id=TransactionId(tx_id), date=now, amount=self._money(amount), category=category
            )
            batch.append((tx, processor))

        lines = [processor.process(tx) for tx, processor in batch]
        for tx, _ in batch:
            try:
                account.apply_transaction(tx)
            except InsufficientFundsError as exc:
                logger.warning("Transaction rejected", extra={"transaction_id": tx.id})
                lines.append(f"[SavingsAccount] {exc}")
                continue
            lines.extend(account.confirmations(tx))

        for tx, _ in batch:
            self.transactions.add(tx)

        lines.append("")
        lines.append("[FinanceApp] All transactions have been processed and recorded.")
        return lines
