from __future__ import annotations

import pytest

from recordkeeper.domain.entities.inventory import ElectronicItem
from recordkeeper.domain.errors import DuplicateKeyError, InvalidValueError, NotFoundError
from recordkeeper.domain.value_objects.ids import ItemId
from recordkeeper.repositories.keyed import KeyedRepo, QuantityRepo
from recordkeeper.repositories.memory import InMemoryKeyedRepo, InMemoryQuantityRepo


def _item(item_id: int, quantity: int = 10, name: str = "Laptop") -> ElectronicItem:
    return ElectronicItem(
        id=ItemId(item_id), name=name, quantity=quantity, brand="Dell", warranty_months=24
    )


@pytest.fixture
def repo() -> InMemoryQuantityRepo[ItemId, ElectronicItem]:
    r: InMemoryQuantityRepo[ItemId, ElectronicItem] = InMemoryQuantityRepo()
    r.add(_item(1))
    r.add(_item(2, 15, "Smartphone"))
    return r


def test_implements_interfaces(repo: InMemoryQuantityRepo[ItemId, ElectronicItem]) -> None:
    assert isinstance(repo, KeyedRepo)
    assert isinstance(repo, QuantityRepo)


def test_add_duplicate_leaves_collection_unchanged(
    repo: InMemoryQuantityRepo[ItemId, ElectronicItem],
) -> None:
    before = repo.list_all()
    with pytest.raises(DuplicateKeyError) as exc_info:
        repo.add(_item(1, 5, "Tablet"))
    assert exc_info.value.key == 1
    assert repo.list_all() == before
    assert repo.get_by_id(ItemId(1)).name == "Laptop"


def test_missing_key_raises_not_found(repo: InMemoryQuantityRepo[ItemId, ElectronicItem]) -> None:
    with pytest.raises(NotFoundError):
        repo.get_by_id(ItemId(99))
    with pytest.raises(NotFoundError):
        repo.remove(ItemId(99))
    with pytest.raises(NotFoundError):
        repo.update_quantity(ItemId(99), 3)
    assert len(repo) == 2


def test_negative_quantity_rejected_before_lookup(
    repo: InMemoryQuantityRepo[ItemId, ElectronicItem],
) -> None:
    with pytest.raises(InvalidValueError):
        repo.update_quantity(ItemId(1), -1)
    assert repo.get_by_id(ItemId(1)).quantity == 10
    # Validation wins over the missing key
    with pytest.raises(InvalidValueError):
        repo.update_quantity(ItemId(99), -1)


def test_update_quantity_replaces_record(
    repo: InMemoryQuantityRepo[ItemId, ElectronicItem],
) -> None:
    before = repo.get_by_id(ItemId(1))
    updated = repo.update_quantity(ItemId(1), 0)
    assert updated.quantity == 0
    assert repo.get_by_id(ItemId(1)) == updated
    # Previously returned values are snapshots
    assert before.quantity == 10
    assert updated.brand == "Dell"


def test_remove_and_listing_order(repo: InMemoryQuantityRepo[ItemId, ElectronicItem]) -> None:
    repo.add(_item(3, 25, "Headphones"))
    assert [i.id for i in repo.list_all()] == [1, 2, 3]
    repo.remove(ItemId(2))
    assert [i.id for i in repo.list_all()] == [1, 3]
    assert ItemId(2) not in repo
    assert repo.contains(ItemId(3))


def test_list_all_returns_new_list(repo: InMemoryQuantityRepo[ItemId, ElectronicItem]) -> None:
    listing = repo.list_all()
    listing.clear()
    assert len(repo.list_all()) == 2


def test_custom_key_and_initial_records() -> None:
    r: InMemoryKeyedRepo[str, ElectronicItem] = InMemoryKeyedRepo(
        key_of=lambda i: i.name, records=[_item(1), _item(2, name="Phone")]
    )
    assert r.get_by_id("Phone").id == 2
    with pytest.raises(DuplicateKeyError):
        InMemoryKeyedRepo(key_of=lambda i: i.name, records=[_item(1), _item(2)])


@pytest.mark.parametrize("bad", [2.5, "5", None, True])
def test_non_integer_quantity_rejected(
    repo: InMemoryQuantityRepo[ItemId, ElectronicItem], bad: object
) -> None:
    with pytest.raises(InvalidValueError):
        repo.update_quantity(ItemId(1), bad)  # type: ignore[arg-type]
    stored = repo.get_by_id(ItemId(1))
    assert stored.quantity == 10
    assert type(stored.quantity) is int


def test_updated_record_is_revalidated(
    repo: InMemoryQuantityRepo[ItemId, ElectronicItem],
) -> None:
    updated = repo.update_quantity(ItemId(2), 7)
    assert isinstance(updated, ElectronicItem)
    assert updated.model_dump() == {
        "id": 2,
        "name": "Smartphone",
        "quantity": 7,
        "brand": "Dell",
        "warranty_months": 24,
    }
