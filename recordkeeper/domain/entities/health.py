from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import PatientId, PrescriptionId


class Patient(BaseModel):
    id: PatientId
    name: str
    age: int = Field(..., ge=0)
    gender: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"ID: {self.id} | {self.name} | Age: {self.age} | Gender: {self.gender}"


class Prescription(BaseModel):
    id: PrescriptionId
    patient_id: PatientId = Field(..., description="Owning patient identifier")
    medication_name: str
    date_issued: date

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id} | Medication: {self.medication_name} | "
            f"Issued: {self.date_issued.isoformat()}"
        )
