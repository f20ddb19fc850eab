# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service: first-login password claim, login and sessions."""

import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone

from pydantic import ValidationError

from intranet.config import get_settings
from intranet.schemas.user import UserDocument
from intranet.security import get_password_hash, verify_password
from intranet.store import DocumentStore
from intranet.store.collections import SESSIONS, USERS

logger = logging.getLogger(__name__)


def load_user(data: dict) -> UserDocument | None:
    """Parse a stored user document, skipping malformed ones."""
    try:
        return UserDocument.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed user document {data.get('id')}: {e}")
        return None


def get_user_by_id(store: DocumentStore, user_id: str) -> UserDocument | None:
    """Get a user by ID."""
    data = store.get(USERS, user_id)
    return load_user(data) if data else None


def get_user_by_badge(store: DocumentStore, badge_number: str) -> UserDocument | None:
    """Get a user by badge number, ignoring case."""
    wanted = badge_number.lower()
    for data in store.fetch_all(USERS):
        if str(data.get("badgeNumber", "")).lower() == wanted:
            return load_user(data)
    return None


def authenticate(
    store: DocumentStore, badge_number: str, password: str
) -> UserDocument | None:
    """Authenticate a user by badge number and password.

    State machine per account:
        NoPassword --(login with non-empty password)--> PasswordSet

    A user without a password adopts the supplied password as permanent
    credential. Locked accounts are denied before any password comparison.
    Every failure returns None without saying why.
    """
    user = get_user_by_badge(store, badge_number)
    if not user:
        logger.info("Login denied: unknown badge number")
        return None
    if user.is_locked:
        logger.info(f"Login denied: account {user.id} is locked")
        return None
    if not password:
        return None

    if not user.has_password:
        hashed = get_password_hash(password)
        store.patch(USERS, user.id, {"passwordHash": hashed})
        logger.info(f"Account {user.id} claimed on first login")
        return user.model_copy(update={"password_hash": hashed})

    if user.password_hash:
        if verify_password(password, user.password_hash):
            return user
        logger.info(f"Login denied: wrong password for {user.id}")
        return None

    # Plain-text credential written by an older deployment
    if user.password is not None and secrets.compare_digest(
        user.password.encode(), password.encode()
    ):
        return _upgrade_legacy_password(store, user, password)

    logger.info(f"Login denied: wrong password for {user.id}")
    return None


def _upgrade_legacy_password(
    store: DocumentStore, user: UserDocument, password: str
) -> UserDocument:
    hashed = get_password_hash(password)
    store.patch(USERS, user.id, {"passwordHash": hashed, "password": None})
    logger.info(f"Upgraded legacy password of {user.id} to a hash")
    return user.model_copy(update={"password_hash": hashed, "password": None})


def create_session(store: DocumentStore, user_id: str) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    now = datetime.utcnow()
    expires_at = now + timedelta(hours=get_settings().session_expiry_hours)

    store.create_or_replace(
        SESSIONS,
        token,
        {
            "userId": user_id,
            "createdAt": now.isoformat(),
            "expiresAt": expires_at.isoformat(),
        },
    )
    return token


def _expires_at(session: dict) -> datetime | None:
    """Parse a session's expiry. Returns None if it is missing or invalid."""
    try:
        expires_at = datetime.fromisoformat(session["expiresAt"])
    except (KeyError, TypeError, ValueError):
        logger.warning(f"Session {session.get('id')} has no valid expiry")
        return None
    if expires_at.tzinfo is not None:
        expires_at = expires_at.astimezone(timezone.utc).replace(tzinfo=None)
    return expires_at


def get_session(store: DocumentStore, token: str) -> dict | None:
    """Get a valid session by token."""
    session = store.get(SESSIONS, token)
    if not session:
        return None
    expires_at = _expires_at(session)
    if expires_at is None or expires_at < datetime.utcnow():
        store.remove(SESSIONS, token)
        return None
    return session


def restore_user(store: DocumentStore, token: str) -> UserDocument | None:
    """Resolve a session token to the current state of its user.

    The user document is re-read on every call, so locks and permission
    changes apply to running sessions.
    """
    session = get_session(store, token)
    if not session:
        return None
    user_id = session.get("userId")
    user = get_user_by_id(store, user_id) if isinstance(user_id, str) else None
    if not user or user.is_locked:
        return None
    return user


def delete_session(store: DocumentStore, token: str) -> bool:
    """Delete a session by token."""
    if not store.get(SESSIONS, token):
        return False
    store.remove(SESSIONS, token)
    return True


def cleanup_expired_sessions(store: DocumentStore) -> int:
    """Delete expired sessions and sessions without a valid expiry.

    Returns count of deleted sessions.
    """
    now = datetime.utcnow()
    count = 0
    for session in store.fetch_all(SESSIONS):
        expires_at = _expires_at(session)
        if expires_at is None or expires_at < now:
            store.remove(SESSIONS, session["id"])
            count += 1
    return count
