# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organisation chart API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_access, get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.rbac.ranks import POLICE_RANKS
from intranet.schemas.org import (
    OrgNodeDocument,
    OrgNodeUpsert,
    OrgTreeNode,
    RankResponse,
)
from intranet.services import org_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore

router = APIRouter()

manage_org = require_permission(Permission.MANAGE_ORG)


@router.get("", response_model=list[OrgTreeNode], summary="Get the chart")
def get_tree(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(get_access),
) -> list[OrgTreeNode]:
    """Root positions with their subordinates, highest rank first."""
    return org_service.get_tree(store)


@router.get("/ranks", response_model=list[RankResponse], summary="List ranks")
def list_ranks(access: AccessContext = Depends(get_access)) -> list[dict]:
    return POLICE_RANKS


@router.post(
    "/nodes",
    response_model=OrgNodeDocument,
    status_code=status.HTTP_201_CREATED,
    summary="Add a position",
)
def create_node(
    data: OrgNodeUpsert,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_org),
) -> OrgNodeDocument:
    try:
        return org_service.create_node(store, data)
    except org_service.InvalidOrgNodeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put(
    "/nodes/{node_id}", response_model=OrgNodeDocument, summary="Edit a position"
)
def update_node(
    node_id: str,
    data: OrgNodeUpsert,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_org),
) -> OrgNodeDocument:
    try:
        node = org_service.update_node(store, node_id, data)
    except org_service.InvalidOrgNodeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not node:
        raise HTTPException(status_code=404, detail="Position not found")
    return node


@router.delete(
    "/nodes/{node_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a position",
)
def delete_node(
    node_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(manage_org),
) -> None:
    """Delete a position. Its subordinates become root positions."""
    if not org_service.delete_node(store, node_id):
        raise HTTPException(status_code=404, detail="Position not found")
