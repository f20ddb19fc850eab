# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public intake: job applications and citizen submissions."""

import logging

from intranet.schemas.records import ApplicationCreate, SubmissionCreate
from intranet.services import record_service
from intranet.store import DocumentData, DocumentStore
from intranet.store.collections import APPLICATIONS, SUBMISSIONS

logger = logging.getLogger(__name__)

CAREER_POSITIONS = {
    "Mittlerer Dienst": "Polizeiobermeister-Anwärter",
    "Gehobener Dienst": "Polizeikommissar-Anwärter",
}

CONTACT_FIELDS = (
    "contactName",
    "contactBirthdate",
    "contactAddress",
    "contactPhone",
    "contactEmail",
)


def submit_application(store: DocumentStore, data: ApplicationCreate) -> DocumentData:
    """Store an application from the public form."""
    document = data.model_dump(by_alias=True, exclude_none=True)
    document.update(
        name=f"{data.first_name} {data.last_name}",
        position=CAREER_POSITIONS[data.career_path],
        status="Eingegangen",
        statusHistory=[],
    )
    record = record_service.create_record(store, APPLICATIONS, document)
    logger.info(f"Received application {record['id']} ({data.career_path})")
    return record


def list_applications(store: DocumentStore) -> list[DocumentData]:
    return record_service.list_records(store, APPLICATIONS)


def submit_tip(store: DocumentStore, data: SubmissionCreate) -> DocumentData:
    """Store a citizen submission. Anonymous submissions keep no contact data."""
    document = data.model_dump(by_alias=True, exclude_none=True)
    title = (data.title or "").strip()
    document["title"] = title or f"{data.type}-Anfrage"
    if data.anonymous:
        for field in CONTACT_FIELDS:
            document.pop(field, None)
    document.update(status="Neu", statusHistory=[])
    record = record_service.create_record(store, SUBMISSIONS, document)
    logger.info(f"Received {data.type} submission {record['id']}")
    return record


def list_tips(store: DocumentStore) -> list[DocumentData]:
    return record_service.list_records(store, SUBMISSIONS)
