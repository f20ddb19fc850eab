# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta, timezone

from intranet.rbac.roles import DEFAULT_ADMIN_ID
from intranet.security import verify_password
from intranet.services import auth_service


def test_first_login_claims_account(seeded_store):
    user = auth_service.authenticate(seeded_store, "Adler 51/01", "P1-geheim")

    assert user is not None
    assert user.id == DEFAULT_ADMIN_ID
    stored = seeded_store.get("users", DEFAULT_ADMIN_ID)
    assert verify_password("P1-geheim", stored["passwordHash"])
    assert stored["passwordHash"] != "P1-geheim"


def test_second_login_with_other_password_fails(seeded_store):
    auth_service.authenticate(seeded_store, "Adler 51/01", "P1-geheim")

    assert auth_service.authenticate(seeded_store, "Adler 51/01", "P2-anders") is None
    assert auth_service.authenticate(seeded_store, "Adler 51/01", "P1-geheim")


def test_badge_matching_ignores_case(seeded_store):
    auth_service.authenticate(seeded_store, "Adler 51/01", "P1-geheim")

    lower = auth_service.authenticate(seeded_store, "adler 51/01", "P1-geheim")
    upper = auth_service.authenticate(seeded_store, "ADLER 51/01", "P1-geheim")

    assert lower is not None and upper is not None
    assert lower.id == upper.id == DEFAULT_ADMIN_ID


def test_password_is_case_sensitive(store, make_user):
    make_user(password="Geheim")

    assert auth_service.authenticate(store, "Falke 12/07", "geheim") is None


def test_unknown_badge(seeded_store):
    assert auth_service.authenticate(seeded_store, "Niemand 00/00", "pw") is None


def test_empty_password_does_not_claim_account(seeded_store):
    assert auth_service.authenticate(seeded_store, "Adler 51/01", "") is None
    assert "passwordHash" not in seeded_store.get("users", DEFAULT_ADMIN_ID)


def test_locked_account_is_denied(store, make_user):
    make_user(password="geheim", isLocked=True)

    assert auth_service.authenticate(store, "Falke 12/07", "geheim") is None


def test_locked_account_without_password_is_not_claimed(store, make_user):
    make_user(password=None, isLocked=True)

    assert auth_service.authenticate(store, "Falke 12/07", "neu") is None
    assert "passwordHash" not in store.get("users", "officer-1")


def test_legacy_plain_password_is_upgraded(store, make_user):
    make_user(password=None, plain_password="alt123")

    user = auth_service.authenticate(store, "Falke 12/07", "alt123")

    assert user is not None
    stored = store.get("users", "officer-1")
    assert stored.get("password") is None
    assert verify_password("alt123", stored["passwordHash"])
    assert auth_service.authenticate(store, "Falke 12/07", "alt123") is not None


def test_legacy_plain_password_mismatch(store, make_user):
    make_user(password=None, plain_password="alt123")

    assert auth_service.authenticate(store, "Falke 12/07", "falsch") is None
    assert store.get("users", "officer-1")["password"] == "alt123"


def test_legacy_upgrade_keeps_other_fields(store, make_user):
    make_user(password=None, plain_password="alt123", discordId="anna#0815")

    auth_service.authenticate(store, "Falke 12/07", "alt123")

    stored = store.get("users", "officer-1")
    assert stored["discordId"] == "anna#0815"
    assert stored["passwordHash"]


def test_malformed_user_document_is_skipped(store):
    store.create_or_replace("users", "broken", {"badgeNumber": None})

    assert auth_service.get_user_by_id(store, "broken") is None


class TestSessions:
    """Tests for session handling."""

    def test_create_and_restore(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")

        user = auth_service.restore_user(store, token)

        assert user is not None
        assert user.id == "officer-1"

    def test_restore_unknown_token(self, store):
        assert auth_service.restore_user(store, "nope") is None

    def test_restore_locked_user(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")
        store.patch("users", "officer-1", {"isLocked": True})

        assert auth_service.restore_user(store, token) is None

    def test_restore_deleted_user(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")
        store.remove("users", "officer-1")

        assert auth_service.restore_user(store, token) is None

    def test_expired_session_is_removed(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")
        past = (datetime.utcnow() - timedelta(minutes=1)).isoformat()
        store.patch("sessions", token, {"expiresAt": past})

        assert auth_service.get_session(store, token) is None
        assert store.get("sessions", token) is None

    def test_delete_session(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")

        assert auth_service.delete_session(store, token) is True
        assert auth_service.delete_session(store, token) is False
        assert auth_service.restore_user(store, token) is None

    def test_cleanup_expired_sessions(self, store, make_user):
        make_user()
        expired = auth_service.create_session(store, "officer-1")
        valid = auth_service.create_session(store, "officer-1")
        past = (datetime.utcnow() - timedelta(hours=1)).isoformat()
        store.patch("sessions", expired, {"expiresAt": past})

        assert auth_service.cleanup_expired_sessions(store) == 1
        assert store.get("sessions", valid) is not None

    def test_session_without_valid_expiry_is_removed(self, store, make_user):
        make_user()
        missing = auth_service.create_session(store, "officer-1")
        garbled = auth_service.create_session(store, "officer-1")
        store.create_or_replace("sessions", missing, {"userId": "officer-1"})
        store.patch("sessions", garbled, {"expiresAt": "morgen"})

        assert auth_service.restore_user(store, missing) is None
        assert auth_service.get_session(store, garbled) is None
        assert store.get("sessions", missing) is None
        assert store.get("sessions", garbled) is None

    def test_session_without_user_id(self, store):
        future = (datetime.utcnow() + timedelta(hours=1)).isoformat()
        store.create_or_replace("sessions", "orphan", {"expiresAt": future})

        assert auth_service.restore_user(store, "orphan") is None

    def test_cleanup_counts_sessions_without_valid_expiry(self, store, make_user):
        make_user()
        valid = auth_service.create_session(store, "officer-1")
        store.create_or_replace("sessions", "broken", {"expiresAt": None})

        assert auth_service.cleanup_expired_sessions(store) == 1
        assert store.get("sessions", "broken") is None
        assert store.get("sessions", valid) is not None

    def test_timezone_aware_expiry(self, store, make_user):
        make_user()
        token = auth_service.create_session(store, "officer-1")
        future = (datetime.now(timezone.utc) + timedelta(hours=1)).isoformat()
        store.patch("sessions", token, {"expiresAt": future})

        assert auth_service.restore_user(store, token) is not None
