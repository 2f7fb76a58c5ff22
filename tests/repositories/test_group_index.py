from __future__ import annotations

from datetime import date

from recordkeeper.domain.entities.health import Prescription
from recordkeeper.domain.value_objects.ids import PatientId, PrescriptionId
from recordkeeper.repositories.group_index import GroupIndex


def _rx(rx_id: int, patient_id: int) -> Prescription:
    return Prescription(
        id=PrescriptionId(rx_id),
        patient_id=PatientId(patient_id),
        medication_name=f"Med {rx_id}",
        date_issued=date(2024, 1, rx_id),
    )


def _index() -> GroupIndex[PatientId, Prescription]:
    return GroupIndex(lambda p: p.patient_id)


def test_rebuild_groups_in_source_order() -> None:
    idx = _index()
    idx.rebuild([_rx(1, 101), _rx(2, 102), _rx(3, 101)])
    assert [p.id for p in idx.lookup(PatientId(101))] == [1, 3]
    assert [p.id for p in idx.lookup(PatientId(102))] == [2]
    assert sorted(idx.keys()) == [101, 102]
    assert len(idx) == 2


def test_lookup_without_dependents_is_empty() -> None:
    idx = _index()
    assert idx.lookup(PatientId(101)) == []
    idx.rebuild([_rx(1, 101)])
    assert idx.lookup(PatientId(103)) == []
    assert idx.lookup(PatientId(999)) == []


def test_rebuild_discards_previous_contents() -> None:
    idx = _index()
    idx.rebuild([_rx(1, 101), _rx(2, 102)])
    idx.rebuild([_rx(3, 103)])
    assert idx.lookup(PatientId(101)) == []
    assert [p.id for p in idx.lookup(PatientId(103))] == [3]


def test_lookup_returns_copy() -> None:
    idx = _index()
    idx.rebuild([_rx(1, 101)])
    idx.lookup(PatientId(101)).clear()
    assert len(idx.lookup(PatientId(101))) == 1
