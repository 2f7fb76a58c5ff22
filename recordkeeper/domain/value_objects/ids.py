from typing import NewType

ItemId = NewType("ItemId", int)
PatientId = NewType("PatientId", int)
PrescriptionId = NewType("PrescriptionId", int)
StudentId = NewType("StudentId", int)
TransactionId = NewType("TransactionId", int)
