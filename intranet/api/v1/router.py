# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from intranet.api.v1 import (
    admin,
    applications,
    auth,
    calendar,
    evidence,
    fleet,
    org,
    press,
    reports,
    tips,
    warrants,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Admin panel routes
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

# Record routes
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(warrants.router, prefix="/warrants", tags=["warrants"])
api_router.include_router(fleet.router, prefix="/fleet", tags=["fleet"])
api_router.include_router(evidence.router, prefix="/evidence", tags=["evidence"])

# Public intake routes
api_router.include_router(
    applications.router, prefix="/applications", tags=["applications"]
)
api_router.include_router(tips.router, prefix="/tips", tags=["tips"])

# Calendar routes
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])

# Press routes
api_router.include_router(press.router, prefix="/press", tags=["press"])

# Organisation chart routes
api_router.include_router(org.router, prefix="/org", tags=["org"])
