# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Duty calendar API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import CalendarEventCreate, CalendarEventDocument
from intranet.services import calendar_service, record_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore
from intranet.store.collections import CALENDAR

router = APIRouter()

view_calendar = require_permission(Permission.VIEW_CALENDAR)


@router.get("", response_model=list[CalendarEventDocument])
def list_events(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(view_calendar),
) -> list[dict]:
    """Public events plus the current user's private ones."""
    return calendar_service.list_events(store, access.user)


@router.post(
    "", response_model=CalendarEventDocument, status_code=status.HTTP_201_CREATED
)
def create_event(
    data: CalendarEventCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(view_calendar),
) -> dict:
    """Create an event. Public events need MANAGE_CALENDAR."""
    if data.is_public and not access.check_permission(Permission.MANAGE_CALENDAR):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: {Permission.MANAGE_CALENDAR.value}",
        )
    return calendar_service.create_event(store, data, access.user)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(view_calendar),
) -> None:
    event = record_service.get_record(store, CALENDAR, event_id)
    if not event or not calendar_service.is_visible(event, access.user):
        raise HTTPException(status_code=404, detail="Event not found")
    can_manage = access.check_permission(Permission.MANAGE_CALENDAR)
    if not calendar_service.can_delete(event, access.user, can_manage):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: {Permission.MANAGE_CALENDAR.value}",
        )
    record_service.delete_record(store, CALENDAR, event_id)
