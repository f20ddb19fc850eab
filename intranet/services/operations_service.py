# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Warrants, fleet and evidence locker."""

from intranet.schemas.records import EvidenceCreate, VehicleCreate, WarrantCreate
from intranet.schemas.user import UserDocument
from intranet.services import record_service
from intranet.store import DocumentData, DocumentStore
from intranet.store.collections import EVIDENCE, FLEET, WARRANTS

VEHICLE_STATUS_CYCLE = {
    "Einsatzbereit": "Im Einsatz",
    "Im Einsatz": "Defekt",
    "Defekt": "Einsatzbereit",
}

EVIDENCE_SEARCH_FIELDS = ("caseNumber", "itemName")


def list_warrants(store: DocumentStore) -> list[DocumentData]:
    return record_service.list_records(store, WARRANTS)


def publish_warrant(store: DocumentStore, data: WarrantCreate) -> DocumentData:
    """Publish a new, active warrant."""
    document = data.model_dump(by_alias=True, exclude_none=True)
    document["active"] = True
    return record_service.create_record(store, WARRANTS, document)


def toggle_warrant(store: DocumentStore, warrant_id: str) -> DocumentData | None:
    """Switch a warrant between active and closed."""
    return record_service.toggle_flag(store, WARRANTS, warrant_id, "active")


def list_vehicles(store: DocumentStore) -> list[DocumentData]:
    return record_service.list_records(store, FLEET)


def register_vehicle(store: DocumentStore, data: VehicleCreate) -> DocumentData:
    """Add a vehicle to the fleet. New vehicles are ready with a full tank."""
    document = data.model_dump(by_alias=True)
    document.update(status="Einsatzbereit", fuel=100, lastDriver=None)
    return record_service.create_record(store, FLEET, document)


def next_vehicle_status(status: str | None) -> str:
    """Next status in the ready -> deployed -> defective cycle."""
    return VEHICLE_STATUS_CYCLE.get(status or "", "Einsatzbereit")


def cycle_vehicle_status(
    store: DocumentStore, vehicle_id: str, driver: UserDocument
) -> DocumentData | None:
    """Advance a vehicle's status and record who changed it last."""
    vehicle = store.get(FLEET, vehicle_id)
    if not vehicle:
        return None
    store.patch(
        FLEET,
        vehicle_id,
        {
            "status": next_vehicle_status(vehicle.get("status")),
            "lastDriver": driver.display_name,
        },
    )
    return store.get(FLEET, vehicle_id)


def list_evidence(
    store: DocumentStore, search: str | None = None
) -> list[DocumentData]:
    return record_service.list_records(store, EVIDENCE, search, EVIDENCE_SEARCH_FIELDS)


def log_evidence(
    store: DocumentStore, data: EvidenceCreate, officer: UserDocument
) -> DocumentData:
    """Check an item into the evidence locker."""
    document = data.model_dump(by_alias=True)
    document["seizedBy"] = officer.display_name
    return record_service.create_record(store, EVIDENCE, document)
