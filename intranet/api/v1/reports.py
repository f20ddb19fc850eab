# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Incident report and criminal complaint API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import (
    ReportCreate,
    ReportDocument,
    ReportStatusUpdate,
    ReportUpdate,
)
from intranet.services import record_service, report_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore
from intranet.store.collections import REPORTS

router = APIRouter()


@router.get("", response_model=list[ReportDocument])
def list_reports(
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_REPORTS)),
) -> list[dict]:
    """List reports, newest first."""
    return report_service.list_reports(store, search)


@router.post("", response_model=ReportDocument, status_code=status.HTTP_201_CREATED)
def create_report(
    data: ReportCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.CREATE_REPORTS)),
) -> dict:
    """File a report in the name of the current user."""
    return report_service.file_report(store, data, access.user)


@router.get("/{report_id}", response_model=ReportDocument)
def get_report(
    report_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_REPORTS)),
) -> dict:
    report = record_service.get_record(store, REPORTS, report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.put("/{report_id}", response_model=ReportDocument)
def update_report(
    report_id: str,
    data: ReportUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.EDIT_REPORTS)),
) -> dict:
    report = report_service.edit_report(store, report_id, data)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.post("/{report_id}/status", response_model=ReportDocument)
def change_report_status(
    report_id: str,
    data: ReportStatusUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.EDIT_REPORTS)),
) -> dict:
    report = record_service.change_status(
        store, REPORTS, report_id, data.status, access.user.display_name, data.note
    )
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_report(
    report_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.DELETE_REPORTS)),
) -> None:
    if not record_service.delete_record(store, REPORTS, report_id):
        raise HTTPException(status_code=404, detail="Report not found")
