# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Evidence locker API endpoints."""

from fastapi import APIRouter, Depends, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import EvidenceCreate, EvidenceDocument
from intranet.services import operations_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore

router = APIRouter()


@router.get("", response_model=list[EvidenceDocument])
def list_evidence(
    search: str | None = None,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_REPORTS)),
) -> list[dict]:
    return operations_service.list_evidence(store, search)


@router.post("", response_model=EvidenceDocument, status_code=status.HTTP_201_CREATED)
def create_evidence(
    data: EvidenceCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_EVIDENCE)),
) -> dict:
    return operations_service.log_evidence(store, data, access.user)
