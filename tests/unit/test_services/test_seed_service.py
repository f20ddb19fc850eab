# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for seed_service."""

from intranet.rbac.laws import DEFAULT_LAWS
from intranet.rbac.roles import DEFAULT_ADMIN_ID, DEFAULT_ROLES
from intranet.services import seed_service


def count_writes(feed, *collections) -> list:
    writes = []
    for collection in collections:
        feed.subscribe(collection, lambda snapshot, c=collection: writes.append(c))
    return writes


def test_bootstrap_seeds_empty_store(store):
    seed_service.run_bootstrap(store)

    assert {r["id"] for r in store.fetch_all("roles")} == {
        r["id"] for r in DEFAULT_ROLES
    }
    assert len(store.fetch_all("laws")) == len(DEFAULT_LAWS)

    admin = store.get("users", DEFAULT_ADMIN_ID)
    assert admin["badgeNumber"] == "Adler 51/01"
    assert admin["isAdmin"] is True
    assert admin["role"] == "LS"
    assert admin["permissions"] == []
    assert admin["specialRoles"] == []
    assert "passwordHash" not in admin
    assert "password" not in admin


def test_second_bootstrap_performs_no_writes(store, feed):
    seed_service.run_bootstrap(store)
    writes = count_writes(feed, "roles", "users", "laws")

    seed_service.run_bootstrap(store)

    assert writes == []


def test_existing_roles_are_not_overwritten(store):
    store.create_or_replace("roles", "LS", {"name": "Eigene Leitung", "permissions": []})

    assert seed_service.seed_roles(store) == 0

    assert store.fetch_all("roles") == [
        {"id": "LS", "name": "Eigene Leitung", "permissions": []}
    ]


def test_admin_not_recreated_when_badge_exists_in_other_case(store):
    store.create_or_replace(
        "users", "custom", {"badgeNumber": "ADLER 51/01", "role": "DSL"}
    )

    assert seed_service.seed_default_admin(store) is False
    assert store.get("users", DEFAULT_ADMIN_ID) is None


def test_admin_created_next_to_other_users(store):
    store.create_or_replace("users", "u1", {"badgeNumber": "Falke 12/07"})

    assert seed_service.seed_default_admin(store) is True
    assert len(store.fetch_all("users")) == 2


def test_laws_not_reseeded(store):
    store.append_new("laws", {"paragraph": "§ 1", "title": "T", "category": "StGB"})

    assert seed_service.seed_laws(store) == 0
    assert len(store.fetch_all("laws")) == 1


def test_failing_step_does_not_stop_bootstrap(store, monkeypatch):
    def broken(store):
        raise RuntimeError("boom")

    monkeypatch.setattr(seed_service, "seed_roles", broken)

    seed_service.run_bootstrap(store)

    assert store.get("users", DEFAULT_ADMIN_ID) is not None
    assert len(store.fetch_all("laws")) == len(DEFAULT_LAWS)
