# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin panel operations on users, roles and law references."""

import logging
import re

from pydantic import ValidationError

from intranet.rbac.permissions import Permission, sanitize_permissions
from intranet.rbac.resolver import effective_permissions
from intranet.rbac.roles import DEFAULT_ADMIN_BADGE, DEFAULT_ADMIN_ID
from intranet.schemas.law import LawCategory, LawDocument, LawUpsert
from intranet.schemas.role import RoleDocument, RoleUpsert
from intranet.schemas.user import UserBase, UserDocument
from intranet.services.access_service import AccessContext, load_roles
from intranet.services.auth_service import get_user_by_id, load_user
from intranet.store import DocumentNotFoundError, DocumentStore
from intranet.store.collections import LAWS, ROLES, USERS

logger = logging.getLogger(__name__)

PARAGRAPH_PATTERN = re.compile(r"(\d+)([a-z]*)", re.IGNORECASE)


class DuplicateBadgeError(Exception):
    """Another account already uses the badge number."""


class ProtectedAccountError(Exception):
    """The account cannot be removed."""


class PrivilegeError(Exception):
    """The acting user may not grant or manage the requested privileges."""


# Users


def list_users(store: DocumentStore, search: str | None = None) -> list[UserDocument]:
    """List users sorted by last name, optionally filtered by a search term.

    The term matches first name, last name or badge number, ignoring case.
    """
    users = [
        user
        for user in (load_user(data) for data in store.fetch_all(USERS))
        if user is not None
    ]
    if search:
        term = search.lower()
        users = [
            u
            for u in users
            if term in u.first_name.lower()
            or term in u.last_name.lower()
            or term in u.badge_number.lower()
        ]
    return sorted(users, key=lambda u: (u.last_name.lower(), u.first_name.lower()))


def is_protected_account(user: UserDocument) -> bool:
    """The seeded default administrator can never be deleted."""
    return (
        user.id == DEFAULT_ADMIN_ID
        or user.badge_number.lower() == DEFAULT_ADMIN_BADGE.lower()
    )


def _ensure_badge_available(
    store: DocumentStore, badge_number: str, user_id: str | None
) -> None:
    wanted = badge_number.lower()
    for data in store.fetch_all(USERS):
        if data["id"] == user_id:
            continue
        if str(data.get("badgeNumber", "")).lower() == wanted:
            raise DuplicateBadgeError(f"Badge number {badge_number} is already in use")


def _profile_fields(data: UserBase) -> dict:
    fields = data.model_dump(by_alias=True)
    fields["permissions"] = [p.value for p in sanitize_permissions(data.permissions)]
    return fields


def ensure_may_manage(actor: AccessContext, target: UserDocument) -> None:
    """Administrator accounts are only managed by holders of ADMIN_ACCESS."""
    if target.is_admin and not actor.check_permission(Permission.ADMIN_ACCESS):
        raise PrivilegeError("Administrator accounts require Administrator-Zugriff")


def ensure_may_grant(
    actor: AccessContext, data: UserBase, existing: UserDocument | None = None
) -> None:
    """Raise PrivilegeError if the profile grants more than the actor may.

    Holders of ADMIN_ACCESS may set anything. Everyone else must leave the
    admin flag, the direct permissions and the special roles as they are,
    and may only assign a primary role whose permissions they hold
    themselves.
    """
    if actor.check_permission(Permission.ADMIN_ACCESS):
        return

    if data.is_admin != (existing.is_admin if existing else False):
        raise PrivilegeError("Changing the administrator flag is not allowed")
    current = set(sanitize_permissions(existing.permissions)) if existing else set()
    if set(sanitize_permissions(data.permissions)) != current:
        raise PrivilegeError("Changing direct permissions is not allowed")
    if set(data.special_roles) != set(existing.special_roles if existing else []):
        raise PrivilegeError("Changing special roles is not allowed")

    if existing is None or data.role != existing.role:
        candidate = UserDocument(id="", badge_number=data.badge_number, role=data.role)
        granted = effective_permissions(candidate, actor.roles)
        held = effective_permissions(actor.user, actor.roles) if actor.user else set()
        if not granted <= held:
            raise PrivilegeError(
                f"Role {data.role} grants permissions you do not hold"
            )


def create_user(
    store: DocumentStore, data: UserBase, actor: AccessContext
) -> UserDocument:
    """Create a user without a password; the first login sets it."""
    ensure_may_grant(actor, data)
    _ensure_badge_available(store, data.badge_number, None)
    user_id = store.append_new(USERS, _profile_fields(data))
    logger.info(f"Created user {user_id} ({data.badge_number})")
    return get_user_by_id(store, user_id)


def update_user(
    store: DocumentStore, user_id: str, data: UserBase, actor: AccessContext
) -> UserDocument | None:
    """Replace a user's profile while keeping the stored credentials."""
    existing = store.get(USERS, user_id)
    if not existing:
        return None
    current = load_user(existing)
    if current:
        ensure_may_manage(actor, current)
    ensure_may_grant(actor, data, current)
    _ensure_badge_available(store, data.badge_number, user_id)

    document = _profile_fields(data)
    for credential in ("passwordHash", "password"):
        if existing.get(credential):
            document[credential] = existing[credential]
    store.create_or_replace(USERS, user_id, document)
    return get_user_by_id(store, user_id)


def toggle_user_lock(
    store: DocumentStore, user_id: str, actor: AccessContext
) -> UserDocument | None:
    """Lock an unlocked account or unlock a locked one."""
    user = get_user_by_id(store, user_id)
    if not user:
        return None
    ensure_may_manage(actor, user)
    store.patch(USERS, user_id, {"isLocked": not user.is_locked})
    logger.info(f"Account {user_id} {'unlocked' if user.is_locked else 'locked'}")
    return get_user_by_id(store, user_id)


def delete_user(store: DocumentStore, user_id: str, actor: AccessContext) -> bool:
    """Delete a user. Returns False if the user does not exist."""
    user = get_user_by_id(store, user_id)
    if not user:
        return False
    if is_protected_account(user):
        raise ProtectedAccountError("The default administrator cannot be deleted")
    ensure_may_manage(actor, user)
    store.remove(USERS, user_id)
    logger.info(f"Deleted user {user_id}")
    return True


# Roles


def role_id_from_name(name: str) -> str:
    """Derive a role id from a display name: "Presse Stelle" -> "PRESSE_STELLE"."""
    return re.sub(r"\s", "_", name.strip().upper())


def list_roles(store: DocumentStore, special: bool | None = None) -> list[RoleDocument]:
    """List roles, optionally only primary (False) or special (True) ones."""
    roles = load_roles(store)
    if special is not None:
        roles = tuple(r for r in roles if r.is_special == special)
    return sorted(roles, key=lambda r: r.name.lower())


def save_role(store: DocumentStore, data: RoleUpsert) -> RoleDocument:
    """Create or update a role. Permissions are stored in canonical form."""
    role_id = data.id or role_id_from_name(data.name)
    document = {
        "name": data.name,
        "isSpecial": data.is_special,
        "permissions": [p.value for p in sanitize_permissions(data.permissions)],
    }
    store.create_or_replace(ROLES, role_id, document)
    logger.info(f"Saved role {role_id}")
    return RoleDocument.model_validate({**document, "id": role_id})


# Laws


def paragraph_sort_key(paragraph: str) -> tuple[int, str]:
    """Sort key ordering "§ 24" before "§ 24a" before "§ 113"."""
    match = PARAGRAPH_PATTERN.search(paragraph)
    if not match:
        return 0, paragraph.lower()
    return int(match.group(1)), match.group(2).lower()


def list_laws(store: DocumentStore, search: str | None = None) -> list[LawDocument]:
    """List laws sorted numerically by paragraph."""
    laws = []
    for data in store.fetch_all(LAWS):
        try:
            laws.append(LawDocument.model_validate(data))
        except ValidationError as e:
            logger.warning(f"Ignoring malformed law document {data.get('id')}: {e}")
    if search:
        term = search.lower()
        laws = [
            law
            for law in laws
            if term in law.paragraph.lower()
            or term in law.title.lower()
            or term in law.category.lower()
        ]
    return sorted(laws, key=lambda law: paragraph_sort_key(law.paragraph))


def group_laws(laws: list[LawDocument]) -> list[LawCategory]:
    """Group laws by category, categories in alphabetical order."""
    groups: dict[str, list[LawDocument]] = {}
    for law in laws:
        groups.setdefault(law.category or "Sonstiges", []).append(law)
    return [LawCategory(category=name, laws=groups[name]) for name in sorted(groups)]


def save_law(
    store: DocumentStore, data: LawUpsert, law_id: str | None = None
) -> LawDocument:
    """Create a law, or replace an existing one when law_id is given."""
    document = data.model_dump(by_alias=True)
    if law_id:
        if not store.get(LAWS, law_id):
            raise DocumentNotFoundError(LAWS, law_id)
        store.create_or_replace(LAWS, law_id, document)
    else:
        law_id = store.append_new(LAWS, document)
    return LawDocument.model_validate({**document, "id": law_id})


def delete_law(store: DocumentStore, law_id: str) -> bool:
    """Delete a law. Returns False if it does not exist."""
    if not store.get(LAWS, law_id):
        return False
    store.remove(LAWS, law_id)
    return True
