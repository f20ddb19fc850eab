# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission tokens and legacy spelling normalization."""

from collections.abc import Iterable
from enum import Enum


class Permission(str, Enum):
    """Canonical permission tokens.

    The values are the spellings persisted by the current version. Older
    deployments stored the lowercase snake-case names listed in
    ``LEGACY_PERMISSION_MAP``.
    """

    VIEW_REPORTS = "Berichte einsehen"
    CREATE_REPORTS = "Berichte erstellen"
    EDIT_REPORTS = "Berichte bearbeiten"
    DELETE_REPORTS = "Berichte löschen"
    MANAGE_USERS = "Nutzer verwalten"
    VIEW_WARRANTS = "Fahndungen einsehen"
    MANAGE_WARRANTS = "Fahndungen verwalten"
    ADMIN_ACCESS = "Administrator-Zugriff"
    MANAGE_LAWS = "Gesetze verwalten"
    MANAGE_FLEET = "Fuhrpark verwalten"
    MANAGE_EVIDENCE = "Asservaten verwalten"
    VIEW_APPLICATIONS = "Bewerbungen einsehen"
    MANAGE_APPLICATIONS = "Bewerbungen verwalten"
    VIEW_TIPS = "Hinweise einsehen"
    MANAGE_TIPS = "Hinweise verwalten"
    VIEW_CALENDAR = "Kalender einsehen"
    MANAGE_CALENDAR = "Kalender verwalten"
    MANAGE_NEWS = "Presse verwalten"
    MANAGE_ORG = "Organigramm verwalten"


# Historical spelling -> canonical token. Closed table, never mutated at runtime.
LEGACY_PERMISSION_MAP: dict[str, Permission] = {
    permission.name.lower(): permission for permission in Permission
}

_CANONICAL: dict[str, Permission] = {
    permission.value: permission for permission in Permission
}


def normalize_permission(token: str) -> Permission | str:
    """Map a persisted token to its canonical Permission.

    Legacy spellings are translated, canonical spellings are returned as the
    enum member, and unknown tokens are returned unchanged so they simply
    never match.
    """
    if token in LEGACY_PERMISSION_MAP:
        return LEGACY_PERMISSION_MAP[token]
    return _CANONICAL.get(token, token)


def normalize_permissions(tokens: Iterable[str]) -> set[Permission | str]:
    """Normalize and deduplicate a collection of persisted tokens."""
    return {normalize_permission(token) for token in tokens}


def sanitize_permissions(tokens: Iterable[str]) -> list[Permission]:
    """Normalize tokens for storage, dropping anything that is not a Permission.

    The result keeps the declaration order of the enum so stored lists are
    stable across saves.
    """
    normalized = normalize_permissions(tokens)
    return [permission for permission in Permission if permission in normalized]
