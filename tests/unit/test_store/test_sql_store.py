# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the SQLAlchemy document store."""

import pytest
from sqlalchemy.exc import OperationalError

from intranet.store import DocumentNotFoundError, StoreWriteError


def test_get_missing_document(store):
    assert store.get("roles", "LS") is None


def test_create_or_replace_and_get(store):
    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})

    assert store.get("roles", "LS") == {"id": "LS", "name": "Leitungsstab"}


def test_create_or_replace_replaces_whole_document(store):
    store.create_or_replace("roles", "LS", {"name": "Leitungsstab", "isSpecial": False})
    store.create_or_replace("roles", "LS", {"name": "Stab"})

    assert store.get("roles", "LS") == {"id": "LS", "name": "Stab"}


def test_id_in_data_is_not_stored(store):
    store.create_or_replace("roles", "LS", {"id": "OTHER", "name": "Leitungsstab"})

    assert store.get("roles", "LS")["id"] == "LS"
    assert store.get("roles", "OTHER") is None


def test_ids_are_scoped_per_collection(store):
    store.create_or_replace("roles", "x", {"name": "role"})
    store.create_or_replace("laws", "x", {"title": "law"})

    assert store.get("roles", "x")["name"] == "role"
    assert store.get("laws", "x")["title"] == "law"


def test_append_new_generates_ids(store):
    first = store.append_new("laws", {"paragraph": "§ 1"})
    second = store.append_new("laws", {"paragraph": "§ 2"})

    assert first != second
    assert {doc["id"] for doc in store.fetch_all("laws")} == {first, second}


def test_fetch_all_is_scoped_to_collection(store):
    store.append_new("laws", {"paragraph": "§ 1"})
    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})

    assert len(store.fetch_all("laws")) == 1
    assert store.fetch_all("users") == []


def test_patch_merges_fields(store):
    store.create_or_replace("users", "u1", {"badgeNumber": "A", "isLocked": False})

    store.patch("users", "u1", {"isLocked": True})

    assert store.get("users", "u1") == {"id": "u1", "badgeNumber": "A", "isLocked": True}


def test_patch_missing_document_raises(store):
    with pytest.raises(DocumentNotFoundError):
        store.patch("users", "ghost", {"isLocked": True})


def test_remove(store):
    store.create_or_replace("users", "u1", {"badgeNumber": "A"})

    store.remove("users", "u1")

    assert store.get("users", "u1") is None


def test_remove_missing_document_is_noop(store):
    store.remove("users", "ghost")


def test_returned_documents_are_copies(store):
    store.create_or_replace("roles", "LS", {"permissions": ["a"]})

    document = store.get("roles", "LS")
    document["permissions"].append("b")

    assert store.get("roles", "LS")["permissions"] == ["a"]


def test_subscribe_delivers_current_snapshot_immediately(store):
    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})
    received = []

    store.subscribe("roles", received.append)

    assert received == [[{"id": "LS", "name": "Leitungsstab"}]]


def test_subscribe_delivers_snapshot_after_each_write(store):
    received = []
    store.subscribe("roles", received.append)

    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})
    store.remove("roles", "LS")

    assert received == [[], [{"id": "LS", "name": "Leitungsstab"}], []]


def test_subscribe_document(store):
    received = []
    store.subscribe_document("users", "u1", received.append)

    store.create_or_replace("users", "u1", {"badgeNumber": "A"})
    store.create_or_replace("users", "u2", {"badgeNumber": "B"})
    store.remove("users", "u1")

    assert received == [None, {"id": "u1", "badgeNumber": "A"}, None]


def test_unsubscribe_stops_notifications(store):
    received = []
    unsubscribe = store.subscribe("roles", received.append)
    unsubscribe()

    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})

    assert received == [[]]


def test_failed_write_rolls_back_and_raises(store, db_session, monkeypatch):
    store.create_or_replace("roles", "LS", {"name": "Leitungsstab"})

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(StoreWriteError) as exc_info:
        store.create_or_replace("roles", "LS", {"name": "Stab"})

    assert isinstance(exc_info.value.__cause__, OperationalError)
    monkeypatch.undo()
    assert store.get("roles", "LS")["name"] == "Leitungsstab"
