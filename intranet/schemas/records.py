# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas for the record collections (reports, warrants, fleet, ...)."""

import datetime
from typing import Literal

from pydantic import ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from intranet.schemas.common import CamelModel, StatusChange

ReportType = Literal["Einsatzbericht", "Strafanzeige"]
ReportStatus = Literal[
    "Offen", "In Bearbeitung", "Abgeschlossen", "Unbearbeitet", "In Prüfung", "Neu"
]
DangerLevel = Literal["Niedrig", "Mittel", "Hoch", "Extrem"]
VehicleStatus = Literal["Einsatzbereit", "Im Einsatz", "Defekt"]
CareerPath = Literal["Mittlerer Dienst", "Gehobener Dienst"]
ApplicationStatus = Literal["Eingegangen", "Prüfung", "Eingeladen", "Abgelehnt"]
SubmissionType = Literal["Hinweis", "Strafanzeige", "Bürgerservice"]
SubmissionStatus = Literal["Neu", "Gelesen", "Archiviert"]
CalendarEventType = Literal[
    "Personal", "Besprechung", "Ausbildung", "Einsatz", "Sonstiges"
]
PressCategory = Literal["Einsatz", "Personal", "Allgemein"]


class RecordDocument(CamelModel):
    """Base for stored records. Unknown fields from older documents are kept."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str
    timestamp: str | None = None


# Reports


class ReportFields(CamelModel):
    """Free-text fields shared by incident reports and criminal complaints."""

    title: str | None = Field(None, max_length=300)
    content: str | None = None
    description: str | None = None
    location: str | None = None
    date: str | None = None
    involved_officers: str | None = None
    involved_units: str | None = None
    applicant: str | None = None
    suspect: str | None = None
    suspect_description: str | None = None
    violation: str | None = None
    incident_details: str | None = None
    notes: str | None = None
    security_level: str | None = None
    contact_data: str | None = None
    incident_time: str | None = None
    incident_end: str | None = None
    witnesses: str | None = None
    measures: str | None = None
    result: str | None = None
    evidence_list: str | None = None
    property_value: str | None = None


class ReportCreate(ReportFields):
    """Schema for filing an incident report or a criminal complaint."""

    type: ReportType = "Einsatzbericht"

    @model_validator(mode="after")
    def validate_incident_report(self) -> "ReportCreate":
        """Incident reports need a title and content."""
        if self.type == "Einsatzbericht" and not (
            (self.title or "").strip() and (self.content or "").strip()
        ):
            raise ValueError("Titel und Inhalt dürfen nicht leer sein.")
        return self


class ReportUpdate(ReportFields):
    """Schema for editing a report. Only provided fields are changed."""


class ReportDocument(RecordDocument):
    type: ReportType
    status: str
    report_number: str
    officer_name: str = ""
    officer_badge: str = ""
    location: str | None = None
    status_history: list[StatusChange] = Field(default_factory=list)


class ReportStatusUpdate(CamelModel):
    status: ReportStatus
    note: str | None = None


# Warrants


class WarrantCreate(CamelModel):
    """Schema for publishing a warrant."""

    target_name: str = Field(..., min_length=1, max_length=200)
    reason: str = Field(..., min_length=1)
    danger_level: DangerLevel = "Mittel"
    last_seen: str = ""
    age: str | None = None
    height: str | None = None
    weight: str | None = None
    hair_color: str | None = None
    eye_color: str | None = None
    features: str | None = None
    case_number: str | None = None


class WarrantDocument(RecordDocument):
    target_name: str
    reason: str = ""
    danger_level: str = "Mittel"
    last_seen: str = ""
    active: bool = True


# Fleet


class VehicleCreate(CamelModel):
    plate: str = Field(..., min_length=1, max_length=20)
    model: str = Field(..., min_length=1, max_length=100)


class VehicleDocument(RecordDocument):
    plate: str
    model: str = ""
    status: VehicleStatus = "Einsatzbereit"
    fuel: int = 100
    last_driver: str | None = None


# Evidence


class EvidenceCreate(CamelModel):
    case_number: str = Field(..., min_length=1, max_length=50)
    item_name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    location: str = ""


class EvidenceDocument(RecordDocument):
    case_number: str
    item_name: str
    description: str = ""
    seized_by: str = ""
    location: str = ""


# Job applications


class ApplicationCreate(CamelModel):
    """Public application form."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    career_path: CareerPath
    motivation: str = Field(..., min_length=1)
    cv: str = ""
    ooc_age: str | None = None
    ic_birth_date: str | None = None
    ic_phone: str | None = None
    discord_id: str | None = None
    gender: str | None = None
    education: str | None = None
    experience: str | None = None


class ApplicationDocument(RecordDocument):
    name: str
    career_path: str
    position: str = ""
    status: str = "Eingegangen"
    motivation: str = ""
    cv: str = ""
    status_history: list[StatusChange] = Field(default_factory=list)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    note: str | None = None


# Citizen submissions (tips, complaints, service requests)


class SubmissionCreate(CamelModel):
    """Public tip / complaint form."""

    type: SubmissionType = "Hinweis"
    title: str | None = Field(None, max_length=300)
    content: str = ""
    anonymous: bool = False
    location: str | None = None
    incident_time: str | None = None
    suspect_info: str | None = None
    contact_name: str | None = None
    contact_birthdate: str | None = None
    contact_address: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None


class SubmissionDocument(RecordDocument):
    type: str
    title: str
    content: str = ""
    status: str = "Neu"
    anonymous: bool = False
    location: str | None = None
    status_history: list[StatusChange] = Field(default_factory=list)


class SubmissionStatusUpdate(CamelModel):
    status: SubmissionStatus
    note: str | None = None


# Calendar


class CalendarEventCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    date: datetime.date
    start_time: str = Field("08:00", pattern=r"^\d{2}:\d{2}$")
    end_time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")
    type: CalendarEventType = "Personal"
    is_public: bool = False


class CalendarEventDocument(RecordDocument):
    title: str
    description: str = ""
    date: str
    start_time: str = ""
    end_time: str | None = None
    type: str = "Personal"
    is_public: bool = False
    created_by: str = ""
    creator_name: str = ""


# Press releases


class PressReleaseCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    category: PressCategory = "Allgemein"


class PressReleaseUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    category: PressCategory | None = None


class PressReleaseDocument(RecordDocument):
    title: str
    content: str
    category: str = "Allgemein"
    author: str = ""
    last_edited_by: str | None = None
    last_edited_at: str | None = None
