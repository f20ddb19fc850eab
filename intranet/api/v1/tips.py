# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Citizen tip and complaint API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import (
    SubmissionCreate,
    SubmissionDocument,
    SubmissionStatusUpdate,
)
from intranet.services import intake_service, record_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore
from intranet.store.collections import SUBMISSIONS

router = APIRouter()


@router.post("", response_model=SubmissionDocument, status_code=status.HTTP_201_CREATED)
def submit_tip(
    data: SubmissionCreate,
    store: DocumentStore = Depends(get_store),
) -> dict:
    """Submit a tip, complaint or service request. Open to the public."""
    return intake_service.submit_tip(store, data)


@router.get("", response_model=list[SubmissionDocument])
def list_tips(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_TIPS)),
) -> list[dict]:
    return intake_service.list_tips(store)


@router.post("/{submission_id}/status", response_model=SubmissionDocument)
def change_tip_status(
    submission_id: str,
    data: SubmissionStatusUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_TIPS)),
) -> dict:
    submission = record_service.change_status(
        store,
        SUBMISSIONS,
        submission_id,
        data.status,
        access.user.display_name,
        data.note,
    )
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@router.delete("/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tip(
    submission_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_TIPS)),
) -> None:
    if not record_service.delete_record(store, SUBMISSIONS, submission_id):
        raise HTTPException(status_code=404, detail="Submission not found")
