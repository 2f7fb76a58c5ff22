from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from recordkeeper.domain.entities.health import Patient, Prescription
from recordkeeper.domain.value_objects.ids import PatientId, PrescriptionId
from recordkeeper.repositories.group_index import GroupIndex
from recordkeeper.repositories.memory import InMemoryKeyedRepo

logger = logging.getLogger(__name__)


class HealthSystem:
    """Patients and prescriptions with a patient → prescriptions lookup.

    The prescription map is derived data: call :meth:`build_prescription_map`
    after changing the prescriptions repository.
    """

    def __init__(self) -> None:
        self.patients: InMemoryKeyedRepo[PatientId, Patient] = InMemoryKeyedRepo()
        self.prescriptions: InMemoryKeyedRepo[PrescriptionId, Prescription] = InMemoryKeyedRepo()
        self._prescription_map: GroupIndex[PatientId, Prescription] = GroupIndex(
            lambda p: p.patient_id
        )

    def seed_data(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        for patient_id, name, age, gender in (
            (101, "Alice Smith", 30, "Female"),
            (102, "Bob Johnson", 45, "Male"),
            (103, "Clara Williams", 29, "Female"),
        ):
            self.patients.add(Patient(id=PatientId(patient_id), name=name, age=age, gender=gender))

        seed = [
            (1, 101, "Amoxicillin 500mg", 10),
            (2, 101, "Ibuprofen 200mg", 5),
            (3, 102, "Paracetamol 500mg", 2),
            (4, 103, "Vitamin C 1000mg", 7),
            (5, 102, "Metformin 500mg", 1),
        ]
        for pid, patient_id, medication, days_ago in seed:
            self.prescriptions.add(
                Prescription(
                    id=PrescriptionId(pid),
                    patient_id=PatientId(patient_id),
                    medication_name=medication,
                    date_issued=today - timedelta(days=days_ago),
                )
            )
        logger.info(
            "Health data seeded",
            extra={"patients": len(self.patients), "prescriptions": len(self.prescriptions)},
        )

    def build_prescription_map(self) -> None:
        self._prescription_map.rebuild(self.prescriptions.list_all())

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        """Return the patient's prescriptions; empty when there are none."""
        return self._prescription_map.lookup(PatientId(patient_id))

    def get_patient(self, patient_id: int) -> Patient:
        """Raises ``NotFoundError`` for an unknown patient."""
        return self.patients.get_by_id(PatientId(patient_id))

    def list_patients(self) -> list[Patient]:
        return self.patients.list_all()
