"""
Unit tests for the in-memory UserStorage.

Covers:
    - list_users (order, copy semantics)
    - get_user (found, missing, first match on duplicate ids)
    - add_user (append, negative id rejected)
"""

import pytest

from demo_services.users.schemas import User
from demo_services.users.storage import UserStorage


def test_list_users_in_insertion_order(user_storage):
    assert [u.username for u in user_storage.list_users()] == ["John", "Anna"]


def test_list_users_returns_copy(user_storage):
    users = user_storage.list_users()
    users.clear()
    assert len(user_storage.list_users()) == 2


def test_get_user_found(user_storage):
    assert user_storage.get_user(2) == User(id=2, username="Anna")


def test_get_user_missing(user_storage):
    assert user_storage.get_user(99) is None


def test_add_user_appends(user_storage):
    added = user_storage.add_user(7, "Hero")
    assert added == User(id=7, username="Hero")
    assert user_storage.list_users()[-1] == added


def test_duplicate_ids_first_wins(user_storage):
    user_storage.add_user(1, "Impostor")
    assert user_storage.get_user(1).username == "John"
    assert len(user_storage.list_users()) == 3


def test_add_user_rejects_negative_id(user_storage):
    with pytest.raises(ValueError, match="non-negative"):
        user_storage.add_user(-1, "Nobody")


def test_empty_storage():
    storage = UserStorage()
    assert storage.list_users() == []
    assert storage.get_user(1) is None
