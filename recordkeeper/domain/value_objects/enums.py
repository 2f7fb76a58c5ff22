from enum import Enum


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class SnapshotStatus(str, Enum):
    LOADED = "LOADED"
    ABSENT = "ABSENT"


class ProcessorKind(str, Enum):
    BANK_TRANSFER = "Bank Transfer"
    MOBILE_MONEY = "Mobile Money"
    CRYPTO_WALLET = "Crypto Wallet"
