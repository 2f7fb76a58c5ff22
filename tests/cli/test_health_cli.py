from __future__ import annotations

import io

import pytest

import recordkeeper.cli.health as health_cli


def test_patient_from_argument(capsys: pytest.CaptureFixture[str]) -> None:
    rc = health_cli.main(["--patient-id", "102"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "=== All Patients ===" in out
    assert "ID: 103 | Clara Williams | Age: 29 | Gender: Female" in out
    assert "Prescriptions for Bob Johnson (ID: 102):" in out
    assert "Medication: Paracetamol 500mg" in out
    assert "Medication: Metformin 500mg" in out
    assert "Amoxicillin" not in out


def test_unknown_patient(capsys: pytest.CaptureFixture[str]) -> None:
    health_cli.main(["--patient-id", "999"])
    assert "Patient with ID 999 not found." in capsys.readouterr().out


def test_prompt_with_invalid_input_falls_back(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "abc")
    rc = health_cli.main([])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Enter a Patient ID" in out
    assert "Invalid input. Displaying prescriptions for Patient ID 101 (fallback)." in out
    assert "Prescriptions for Alice Smith (ID: 101):" in out


def test_prompt_with_valid_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": " 103 ")
    health_cli.main([])
    out = capsys.readouterr().out
    assert "Prescriptions for Clara Williams (ID: 103):" in out
    assert "Vitamin C 1000mg" in out


def test_patient_without_prescriptions(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    from recordkeeper.application.services.health_service import HealthSystem
    from recordkeeper.domain.entities.health import Patient
    from recordkeeper.domain.value_objects.ids import PatientId

    class _System(HealthSystem):
        def seed_data(self, today=None) -> None:  # type: ignore[no-untyped-def]
            super().seed_data(today)
            self.patients.add(Patient(id=PatientId(104), name="Dan", age=40, gender="Male"))

    monkeypatch.setattr(health_cli, "HealthSystem", _System)
    health_cli.main(["--patient-id", "104"])
    assert "  No prescriptions found for this patient." in capsys.readouterr().out


def test_closed_stdin_falls_back(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    rc = health_cli.main([])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Invalid input. Displaying prescriptions for Patient ID 101 (fallback)." in out
    assert "Prescriptions for Alice Smith (ID: 101):" in out
