from .health import Patient, Prescription
from .inventory import ElectronicItem, GroceryItem, InventoryItem, LoggedItem
from .student import Student, grade_for
from .transaction import Transaction

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "LoggedItem",
    "Patient",
    "Prescription",
    "Student",
    "Transaction",
    "grade_for",
]
