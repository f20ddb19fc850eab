# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Job application API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import (
    ApplicationCreate,
    ApplicationDocument,
    ApplicationStatusUpdate,
)
from intranet.services import intake_service, record_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore
from intranet.store.collections import APPLICATIONS

router = APIRouter()


@router.post(
    "", response_model=ApplicationDocument, status_code=status.HTTP_201_CREATED
)
def submit_application(
    data: ApplicationCreate,
    store: DocumentStore = Depends(get_store),
) -> dict:
    """Submit an application. Open to the public."""
    return intake_service.submit_application(store, data)


@router.get("", response_model=list[ApplicationDocument])
def list_applications(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_APPLICATIONS)),
) -> list[dict]:
    return intake_service.list_applications(store)


@router.post("/{application_id}/status", response_model=ApplicationDocument)
def change_application_status(
    application_id: str,
    data: ApplicationStatusUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(
        require_permission(Permission.MANAGE_APPLICATIONS)
    ),
) -> dict:
    application = record_service.change_status(
        store,
        APPLICATIONS,
        application_id,
        data.status,
        access.user.display_name,
        data.note,
    )
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application
