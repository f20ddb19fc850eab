# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Incident reports and criminal complaints."""

import random
from datetime import datetime

from intranet.schemas.records import ReportCreate, ReportUpdate
from intranet.schemas.user import UserDocument
from intranet.services import record_service
from intranet.store import DocumentData, DocumentStore
from intranet.store.collections import REPORTS

SEARCH_FIELDS = ("reportNumber", "officerName", "applicant")

INITIAL_STATUS = {
    "Einsatzbericht": "Offen",
    "Strafanzeige": "Unbearbeitet",
}


def generate_report_number() -> str:
    """Return a case number like ``BTS-482913-2026``."""
    return f"BTS-{random.randint(100000, 999999)}-{datetime.utcnow().year}"


def list_reports(store: DocumentStore, search: str | None = None) -> list[DocumentData]:
    """List reports, searching report number, officer name and applicant."""
    return record_service.list_records(store, REPORTS, search, SEARCH_FIELDS)


def file_report(
    store: DocumentStore, data: ReportCreate, author: UserDocument
) -> DocumentData:
    """File a report in the author's name."""
    status = INITIAL_STATUS[data.type]
    document = data.model_dump(by_alias=True, exclude_none=True)
    document.update(
        reportNumber=generate_report_number(),
        status=status,
        officerName=author.display_name,
        officerBadge=author.badge_number,
        statusHistory=[record_service.status_entry(status, author.display_name)],
    )
    document.setdefault("date", record_service.now_iso())
    return record_service.create_record(store, REPORTS, document)


def edit_report(
    store: DocumentStore, report_id: str, data: ReportUpdate
) -> DocumentData | None:
    """Apply the provided fields to a report."""
    changes = data.model_dump(by_alias=True, exclude_unset=True)
    return record_service.update_record(store, REPORTS, report_id, changes)
