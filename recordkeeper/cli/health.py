from __future__ import annotations

import argparse
from typing import Sequence

from recordkeeper.application.services.health_service import HealthSystem
from recordkeeper.config.settings import settings
from recordkeeper.domain.errors import NotFoundError
from recordkeeper.logging_config import get_logger

FALLBACK_PATIENT_ID = 101


def _print_all_patients(system: HealthSystem) -> None:
    print("=== All Patients ===")
    patients = system.list_patients()
    if not patients:
        print("No patients found.")
        return
    for p in patients:
        print(p)


def _print_prescriptions(system: HealthSystem, patient_id: int) -> None:
    try:
        patient = system.get_patient(patient_id)
    except NotFoundError:
        print(f"Patient with ID {patient_id} not found.")
        return

    prescriptions = system.get_prescriptions_by_patient_id(patient_id)
    print(f"\nPrescriptions for {patient.name} (ID: {patient_id}):")
    if not prescriptions:
        print("  No prescriptions found for this patient.")
        return
    for pres in prescriptions:
        print(f"  - {pres}")


def _resolve_patient_id(raw: str | None) -> int:
    if raw is None:
        print("\nEnter a Patient ID to display their prescriptions (e.g., 101):")
        try:
            raw = input("> ")
        except EOFError:
            raw = ""
    try:
        return int(raw.strip())
    except ValueError:
        print(
            f"Invalid input. Displaying prescriptions for Patient ID {FALLBACK_PATIENT_ID} "
            "(fallback)."
        )
        return FALLBACK_PATIENT_ID


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Patient and prescription lookup")
    p.add_argument(
        "--patient-id",
        metavar="ID",
        help="Patient whose prescriptions are shown (prompted for when omitted)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(settings.log_file, settings.log_level)

    system = HealthSystem()
    system.seed_data()
    system.build_prescription_map()

    _print_all_patients(system)
    patient_id = _resolve_patient_id(args.patient_id)
    _print_prescriptions(system, patient_id)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
