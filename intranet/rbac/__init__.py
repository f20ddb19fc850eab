# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission model."""

from intranet.rbac.permissions import (
    LEGACY_PERMISSION_MAP,
    Permission,
    normalize_permission,
    normalize_permissions,
    sanitize_permissions,
)
from intranet.rbac.resolver import effective_permissions, has_permission

__all__ = [
    "LEGACY_PERMISSION_MAP",
    "Permission",
    "effective_permissions",
    "has_permission",
    "normalize_permission",
    "normalize_permissions",
    "sanitize_permissions",
]
