# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Press release API endpoints. Reading is public."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import (
    PressReleaseCreate,
    PressReleaseDocument,
    PressReleaseUpdate,
)
from intranet.services import press_service, record_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore
from intranet.store.collections import NEWS

router = APIRouter()

manage_news = require_permission(Permission.MANAGE_NEWS)


@router.get("", response_model=list[PressReleaseDocument])
def list_releases(store: DocumentStore = Depends(get_store)) -> list[dict]:
    return press_service.list_releases(store)


@router.post(
    "", response_model=PressReleaseDocument, status_code=status.HTTP_201_CREATED
)
def create_release(
    data: PressReleaseCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_news),
) -> dict:
    return press_service.publish_release(store, data, access.user)


@router.put("/{release_id}", response_model=PressReleaseDocument)
def update_release(
    release_id: str,
    data: PressReleaseUpdate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_news),
) -> dict:
    release = press_service.edit_release(store, release_id, data, access.user)
    if not release:
        raise HTTPException(status_code=404, detail="Press release not found")
    return release


@router.delete("/{release_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_release(
    release_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_news),
) -> None:
    if not record_service.delete_record(store, NEWS, release_id):
        raise HTTPException(status_code=404, detail="Press release not found")
