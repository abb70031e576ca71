"""Contract tests shared by the class-based and closure-based stores."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from memstore.exceptions import EntityNotFoundError, InvalidEntityError
from memstore.models import Product, User
from memstore.repository import InMemoryRepository, create_in_memory_repository

_FACTORIES: dict[str, Callable[[], Any]] = {
    "class": InMemoryRepository,
    "functional": create_in_memory_repository,
}


@pytest.fixture(params=sorted(_FACTORIES))
def repo(request: pytest.FixtureRequest) -> Any:
    return _FACTORIES[request.param]()


def test_create_then_find_by_id_returns_same_entity(repo: Any) -> None:
    user = User(id="1", name="Putri")

    assert repo.create(user) is user
    assert repo.find_by_id("1") is user


def test_missing_identifier_is_reported_as_value(repo: Any) -> None:
    assert repo.find_by_id("nope") is None
    assert repo.remove("nope") is False
    assert repo.delete("nope") is False


def test_find_all_lists_in_insertion_order(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))
    repo.create(User(id="2", name="Anggit"))

    assert repo.find_all() == [User(id="1", name="Putri"), User(id="2", name="Anggit")]


def test_find_all_snapshot_is_not_affected_by_later_mutation(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))
    snapshot = repo.find_all()

    repo.create(User(id="2", name="Anggit"))
    repo.remove("1")

    assert snapshot == [User(id="1", name="Putri")]
    assert repo.find_all() == [User(id="2", name="Anggit")]


def test_create_overwrites_existing_identifier_in_place(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))
    repo.create(User(id="2", name="Anggit"))
    repo.create(User(id="1", name="Putri A."))

    assert [u.name for u in repo.find_all()] == ["Putri A.", "Anggit"]
    assert repo.count() == 2


def test_create_rejects_entity_without_identifier(repo: Any) -> None:
    with pytest.raises(InvalidEntityError):
        repo.create({"name": "nameless"})
    with pytest.raises(InvalidEntityError):
        repo.create({"id": "", "name": "blank"})
    assert repo.count() == 0


def test_update_merges_partial_fields(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))
    repo.create(User(id="2", name="Anggit"))

    updated = repo.update("2", {"name": "Anggit S."})

    assert updated == User(id="2", name="Anggit S.")
    assert repo.find_by_id("2") == updated


def test_update_preserves_fields_absent_from_partial(repo: Any) -> None:
    repo.create(Product(id="1", name="Soto", price=1000))

    updated = repo.update("1", {"price": 1200})

    assert updated.name == "Soto"
    assert updated.price == 1200


def test_update_missing_identifier_raises_not_found(repo: Any) -> None:
    with pytest.raises(EntityNotFoundError) as exc_info:
        repo.update("99", {"name": "ghost"})

    assert exc_info.value.identifier == "99"
    assert repo.count() == 0


def test_update_cannot_change_identifier(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))

    updated = repo.update("1", {"id": "7", "name": "Putri A."})

    assert updated.id == "1"
    assert repo.find_by_id("7") is None
    assert repo.find_all() == [User(id="1", name="Putri A.")]


def test_update_with_invalid_field_leaves_store_unchanged(repo: Any) -> None:
    original = Product(id="1", name="Soto", price=1000)
    repo.create(original)

    with pytest.raises(InvalidEntityError):
        repo.update("1", {"price": -5})
    with pytest.raises(InvalidEntityError):
        repo.update("1", {"colour": "red"})

    assert repo.find_by_id("1") is original


def test_remove_twice(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))

    assert repo.remove("1") is True
    assert repo.remove("1") is False
    assert repo.find_by_id("1") is None
    assert repo.find_all() == []


def test_count_tracks_creates_minus_removes(repo: Any) -> None:
    for i in range(5):
        repo.create({"id": str(i), "n": i})
    repo.create({"id": "0", "n": 100})
    repo.delete("3")
    repo.delete("missing")

    assert repo.count() == len(repo.find_all()) == 4
    assert repo.exists("0")
    assert not repo.exists("3")


def test_clear_empties_store(repo: Any) -> None:
    repo.create(User(id="1", name="Putri"))
    repo.clear()

    assert repo.find_all() == []


def test_dict_entities_are_supported(repo: Any) -> None:
    repo.create({"id": "a", "name": "Soto", "price": 1000})

    updated = repo.update("a", {"price": 1500, "spicy": True})

    assert updated == {"id": "a", "name": "Soto", "price": 1500, "spicy": True}


def test_custom_identifier_field() -> None:
    for factory in _FACTORIES.values():
        repo = factory(id_field="sku")
        repo.create({"sku": "X-1", "name": "Soto"})

        assert repo.find_by_id("X-1") == {"sku": "X-1", "name": "Soto"}
        assert repo.update("X-1", {"sku": "Y-2"})["sku"] == "X-1"


def test_stores_are_independent() -> None:
    users = InMemoryRepository[User]()
    products = InMemoryRepository[Product]()

    users.create(User(id="1", name="Putri"))
    products.create(Product(id="1", name="Soto", price=1000))

    assert users.find_by_id("1") == User(id="1", name="Putri")
    assert products.find_by_id("1") == Product(id="1", name="Soto", price=1000)

    a = create_in_memory_repository()
    b = create_in_memory_repository()
    a.create({"id": "1"})
    assert b.find_by_id("1") is None


class TestClassRepositoryDunders:
    def test_len_contains_iter(self) -> None:
        repo = InMemoryRepository[User]()
        repo.create(User(id="1", name="Putri"))
        repo.create(User(id="2", name="Anggit"))

        assert len(repo) == 2
        assert "1" in repo
        assert "3" not in repo
        assert [u.id for u in repo] == ["1", "2"]

    def test_iteration_tolerates_mutation(self) -> None:
        repo = InMemoryRepository[User]()
        repo.create(User(id="1", name="Putri"))
        repo.create(User(id="2", name="Anggit"))

        for user in repo:
            repo.delete(user.id)

        assert len(repo) == 0
