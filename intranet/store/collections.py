# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Collection names used in the document store."""

USERS = "users"
ROLES = "roles"
LAWS = "laws"
SESSIONS = "sessions"

REPORTS = "reports"
WARRANTS = "warrants"
FLEET = "fleet"
EVIDENCE = "evidence"
APPLICATIONS = "applications"
SUBMISSIONS = "submissions"
CALENDAR = "calendar"
NEWS = "news"
ORG_NODES = "orgNodes"
