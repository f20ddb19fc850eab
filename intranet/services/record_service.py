# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Generic operations on record collections."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from intranet.schemas.common import StatusChange
from intranet.store import DocumentData, DocumentStore


def now_iso() -> str:
    """Current UTC time as ISO-8601 string, the format stored in documents."""
    return datetime.utcnow().isoformat()


def list_records(
    store: DocumentStore,
    collection: str,
    search: str | None = None,
    search_fields: Iterable[str] = (),
) -> list[DocumentData]:
    """List records newest first, optionally filtered by a search term.

    The term matches any of ``search_fields`` as case-insensitive substring.
    """
    records = store.fetch_all(collection)
    if search:
        term = search.lower()
        fields = tuple(search_fields)
        records = [
            record
            for record in records
            if any(term in str(record.get(f) or "").lower() for f in fields)
        ]
    return sorted(records, key=lambda r: r.get("timestamp") or "", reverse=True)


def get_record(
    store: DocumentStore, collection: str, record_id: str
) -> DocumentData | None:
    """Get a record by ID."""
    return store.get(collection, record_id)


def create_record(
    store: DocumentStore, collection: str, data: dict[str, Any]
) -> DocumentData:
    """Insert a record, stamping it with the creation time."""
    document = {**data}
    document.setdefault("timestamp", now_iso())
    record_id = store.append_new(collection, document)
    return {**document, "id": record_id}


def update_record(
    store: DocumentStore, collection: str, record_id: str, changes: dict[str, Any]
) -> DocumentData | None:
    """Merge changes into a record. Returns None if it does not exist."""
    if not store.get(collection, record_id):
        return None
    if changes:
        store.patch(collection, record_id, changes)
    return store.get(collection, record_id)


def delete_record(store: DocumentStore, collection: str, record_id: str) -> bool:
    """Delete a record. Returns False if it does not exist."""
    if not store.get(collection, record_id):
        return False
    store.remove(collection, record_id)
    return True


def status_entry(status: str, changed_by: str, note: str | None = None) -> dict:
    return StatusChange(
        status=status, changed_by=changed_by, timestamp=now_iso(), note=note
    ).model_dump(by_alias=True, exclude_none=True)


def change_status(
    store: DocumentStore,
    collection: str,
    record_id: str,
    status: str,
    changed_by: str,
    note: str | None = None,
) -> DocumentData | None:
    """Set a record's status and append the change to its status history."""
    record = store.get(collection, record_id)
    if not record:
        return None
    history = list(record.get("statusHistory") or [])
    history.append(status_entry(status, changed_by, note))
    store.patch(collection, record_id, {"status": status, "statusHistory": history})
    return store.get(collection, record_id)


def toggle_flag(
    store: DocumentStore, collection: str, record_id: str, field: str
) -> DocumentData | None:
    """Invert a boolean field of a record."""
    record = store.get(collection, record_id)
    if not record:
        return None
    store.patch(collection, record_id, {field: not record.get(field, False)})
    return store.get(collection, record_id)
