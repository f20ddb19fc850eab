# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission checks bound to a user and the current role definitions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pydantic import ValidationError

from intranet.rbac.permissions import Permission
from intranet.rbac.resolver import effective_permissions, has_permission
from intranet.schemas.role import RoleDocument
from intranet.schemas.user import UserDocument
from intranet.services.auth_service import load_user
from intranet.store import DocumentData, DocumentStore, Unsubscribe
from intranet.store.collections import ROLES, USERS

logger = logging.getLogger(__name__)


def parse_roles(documents: list[DocumentData]) -> tuple[RoleDocument, ...]:
    """Parse role documents, skipping malformed ones."""
    roles = []
    for data in documents:
        try:
            roles.append(RoleDocument.model_validate(data))
        except ValidationError as e:
            logger.warning(f"Ignoring malformed role document {data.get('id')}: {e}")
    return tuple(roles)


def load_roles(store: DocumentStore) -> tuple[RoleDocument, ...]:
    """Read the current role definitions."""
    return parse_roles(store.fetch_all(ROLES))


@dataclass(frozen=True)
class AccessContext:
    """A user together with the role definitions to judge them by.

    Built per request and handed to endpoints explicitly; holds no verdicts.
    """

    user: UserDocument | None
    roles: tuple[RoleDocument, ...] = ()

    def check_permission(self, permission: Permission | str) -> bool:
        return has_permission(self.user, permission, self.roles)

    def permission_list(self) -> list[str]:
        """Effective canonical permissions, in declaration order."""
        if self.user is None:
            return []
        if self.user.is_admin:
            return [p.value for p in Permission]
        granted = effective_permissions(self.user, self.roles)
        return [p.value for p in Permission if p in granted]


def build_access_context(
    store: DocumentStore, user: UserDocument | None
) -> AccessContext:
    """Create an access context from a fresh read of the roles collection."""
    return AccessContext(user=user, roles=load_roles(store))


@dataclass
class LiveAccess:
    """Access context kept current through store subscriptions.

    Subscribes to the roles collection and to the user's own document. Every
    ``check_permission`` call runs the resolver against the latest
    snapshots, so an update delivered by the store is honoured by the next
    check. Listeners registered with ``on_change`` are called after each
    refresh. Call ``close`` (or leave the ``with`` block) to unsubscribe.
    """

    store: DocumentStore
    user_id: str
    _user: UserDocument | None = field(default=None, init=False)
    _roles: tuple[RoleDocument, ...] = field(default=(), init=False)
    _listeners: list[Callable[[AccessContext], None]] = field(
        default_factory=list, init=False
    )
    _unsubscribers: list[Unsubscribe] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self._unsubscribers.append(
            self.store.subscribe(ROLES, self._on_roles)
        )
        self._unsubscribers.append(
            self.store.subscribe_document(USERS, self.user_id, self._on_user)
        )

    @property
    def context(self) -> AccessContext:
        return AccessContext(user=self._user, roles=self._roles)

    def check_permission(self, permission: Permission | str) -> bool:
        return self.context.check_permission(permission)

    def on_change(self, listener: Callable[[AccessContext], None]) -> None:
        """Register a callback invoked with the new context after each update."""
        self._listeners.append(listener)

    def close(self) -> None:
        """Tear down both subscriptions."""
        while self._unsubscribers:
            self._unsubscribers.pop()()
        self._listeners.clear()

    def __enter__(self) -> "LiveAccess":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_roles(self, documents: list[DocumentData]) -> None:
        self._roles = parse_roles(documents)
        self._notify()

    def _on_user(self, document: DocumentData | None) -> None:
        self._user = load_user(document) if document else None
        self._notify()

    def _notify(self) -> None:
        context = self.context
        for listener in list(self._listeners):
            listener(context)
