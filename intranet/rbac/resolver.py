# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization resolver.

Pure functions of (user, permission, roles): no I/O, no caching, no
exceptions. Callers fetch the role definitions themselves and re-invoke the
resolver whenever the user document or the roles collection changes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from intranet.rbac.permissions import (
    Permission,
    normalize_permission,
    normalize_permissions,
)

if TYPE_CHECKING:
    from intranet.schemas.role import RoleDocument
    from intranet.schemas.user import UserDocument


def effective_permissions(
    user: UserDocument, roles: Iterable[RoleDocument]
) -> set[Permission | str]:
    """Get the normalized permission set granted by direct grants and roles.

    Secondary roles are purely additive: every role whose id is the primary
    role or one of the special roles contributes its permissions. The admin
    flag is not considered here.
    """
    role_ids = {user.role, *user.special_roles}
    tokens = list(user.permissions)
    for role in roles:
        if role.id in role_ids:
            tokens.extend(role.permissions)
    return normalize_permissions(tokens)


def has_permission(
    user: UserDocument | None,
    permission: Permission | str,
    roles: Iterable[RoleDocument],
) -> bool:
    """Check if a user may perform the action guarded by a permission."""
    if user is None:
        return False

    # Administrators pass every check, independent of their roles
    if user.is_admin:
        return True

    return normalize_permission(permission) in effective_permissions(user, roles)
