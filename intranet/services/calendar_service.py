# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Duty calendar."""

from intranet.schemas.records import CalendarEventCreate
from intranet.schemas.user import UserDocument
from intranet.services import record_service
from intranet.store import DocumentData, DocumentStore
from intranet.store.collections import CALENDAR


def is_visible(event: DocumentData, user: UserDocument) -> bool:
    """Public events are visible to everyone, private ones to their creator."""
    return bool(event.get("isPublic")) or event.get("createdBy") == user.id


def list_events(store: DocumentStore, user: UserDocument) -> list[DocumentData]:
    """Events visible to the user, in chronological order."""
    events = [e for e in store.fetch_all(CALENDAR) if is_visible(e, user)]
    return sorted(events, key=lambda e: (e.get("date") or "", e.get("startTime") or ""))


def create_event(
    store: DocumentStore, data: CalendarEventCreate, creator: UserDocument
) -> DocumentData:
    document = data.model_dump(by_alias=True, exclude_none=True)
    document.update(
        date=data.date.isoformat(),
        createdBy=creator.id,
        creatorName=creator.display_name,
    )
    return record_service.create_record(store, CALENDAR, document)


def can_delete(event: DocumentData, user: UserDocument, can_manage: bool) -> bool:
    """Creators delete their own events; managers delete any."""
    return can_manage or event.get("createdBy") == user.id
