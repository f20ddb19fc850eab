# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Default roles and the reserved administrator account."""

from .permissions import Permission

TOP_LEVEL_ROLE_ID = "LS"
DEFAULT_USER_ROLE_ID = "DSL"
PRESS_ROLE_ID = "PRESSE"

# Leitungsstab carries every permission so it stays useful once a
# non-admin account is assigned to it
LEADERSHIP_PERMISSIONS = [p.value for p in Permission]

# Default roles to seed on first run.
# Only the press office is a special role: an additive "extra hat" that is
# granted next to a primary role.
DEFAULT_ROLES = [
    {
        "id": TOP_LEVEL_ROLE_ID,
        "name": "Leitungsstab",
        "isSpecial": False,
        "permissions": LEADERSHIP_PERMISSIONS,
    },
    {
        "id": DEFAULT_USER_ROLE_ID,
        "name": "Dienststellenleitung",
        "isSpecial": False,
        "permissions": [
            Permission.VIEW_REPORTS.value,
            Permission.CREATE_REPORTS.value,
            Permission.EDIT_REPORTS.value,
            Permission.DELETE_REPORTS.value,
            Permission.MANAGE_USERS.value,
            Permission.VIEW_WARRANTS.value,
            Permission.MANAGE_WARRANTS.value,
            Permission.MANAGE_FLEET.value,
            Permission.MANAGE_EVIDENCE.value,
            Permission.VIEW_APPLICATIONS.value,
            Permission.MANAGE_APPLICATIONS.value,
            Permission.VIEW_TIPS.value,
            Permission.MANAGE_TIPS.value,
            Permission.VIEW_CALENDAR.value,
            Permission.MANAGE_CALENDAR.value,
        ],
    },
    {
        "id": "ED",
        "name": "Einsatzdienst",
        "isSpecial": False,
        "permissions": [
            Permission.VIEW_REPORTS.value,
            Permission.CREATE_REPORTS.value,
            Permission.EDIT_REPORTS.value,
            Permission.VIEW_WARRANTS.value,
            Permission.MANAGE_EVIDENCE.value,
            Permission.VIEW_TIPS.value,
            Permission.VIEW_CALENDAR.value,
        ],
    },
    {
        "id": "AW",
        "name": "Anwärter",
        "isSpecial": False,
        "permissions": [
            Permission.VIEW_REPORTS.value,
            Permission.CREATE_REPORTS.value,
            Permission.VIEW_WARRANTS.value,
            Permission.VIEW_CALENDAR.value,
        ],
    },
    {
        "id": PRESS_ROLE_ID,
        "name": "Pressestelle",
        "isSpecial": True,
        "permissions": [
            Permission.MANAGE_NEWS.value,
            Permission.VIEW_TIPS.value,
        ],
    },
]

DEFAULT_ADMIN_ID = "admin-1"
DEFAULT_ADMIN_BADGE = "Adler 51/01"

# Created without a password; the first login claims the account
DEFAULT_ADMIN = {
    "id": DEFAULT_ADMIN_ID,
    "firstName": "Thomas",
    "lastName": "Mueller",
    "rank": "Bundespolizeipräsident",
    "badgeNumber": DEFAULT_ADMIN_BADGE,
    "role": TOP_LEVEL_ROLE_ID,
    "specialRoles": [],
    "isAdmin": True,
    "permissions": [],
    "isLocked": False,
}
