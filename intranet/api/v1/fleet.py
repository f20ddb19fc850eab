# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Fleet API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intranet.api.deps import get_store, require_permission
from intranet.rbac.permissions import Permission
from intranet.schemas.records import VehicleCreate, VehicleDocument
from intranet.services import operations_service
from intranet.services.access_service import AccessContext
from intranet.store import DocumentStore

router = APIRouter()


@router.get("", response_model=list[VehicleDocument])
def list_vehicles(
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_REPORTS)),
) -> list[dict]:
    return operations_service.list_vehicles(store)


@router.post("", response_model=VehicleDocument, status_code=status.HTTP_201_CREATED)
def create_vehicle(
    data: VehicleCreate,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.MANAGE_FLEET)),
) -> dict:
    return operations_service.register_vehicle(store, data)


@router.post("/{vehicle_id}/cycle-status", response_model=VehicleDocument)
def cycle_vehicle_status(
    vehicle_id: str,
    store: DocumentStore = Depends(get_store),
    access: AccessContext = Depends(require_permission(Permission.VIEW_REPORTS)),
) -> dict:
    """Advance the vehicle status and record the current user as last driver."""
    vehicle = operations_service.cycle_vehicle_status(store, vehicle_id, access.user)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle
