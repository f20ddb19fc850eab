# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Warrant API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import WarrantCreate, WarrantDocument
from intranet.services import operations_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore

router = APIRouter()


@router.get("", response_model=list[WarrantDocument])
def list_warrants(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_WARRANTS)),
) -> list[dict]:
    return operations_service.list_warrants(store)


@router.post("", response_model=WarrantDocument, status_code=status.HTTP_201_CREATED)
def create_warrant(
    data: WarrantCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_WARRANTS)),
) -> dict:
    return operations_service.publish_warrant(store, data)


@router.post("/{warrant_id}/toggle", response_model=WarrantDocument)
def toggle_warrant(
    warrant_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_WARRANTS)),
) -> dict:
    """Close an active warrant or reopen a closed one."""
    warrant = operations_service.toggle_warrant(store, warrant_id)
    if not warrant:
        raise HTTPException(status_code=404, detail="Warrant not found")
    return warrant
