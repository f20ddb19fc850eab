# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the record collection services."""

import re
from datetime import date

import pytest
from pydantic import ValidationError

from intranet.schemas.records import (
    ApplicationCreate,
    CalendarEventCreate,
    EvidenceCreate,
    PressReleaseCreate,
    PressReleaseUpdate,
    ReportCreate,
    ReportUpdate,
    SubmissionCreate,
    VehicleCreate,
    WarrantCreate,
)
from intranet.services import (
    calendar_service,
    intake_service,
    operations_service,
    press_service,
    record_service,
    report_service,
)


class TestRecordService:
    """Tests for the generic record operations."""

    def test_list_newest_first(self, store):
        record_service.create_record(store, "reports", {"timestamp": "2026-01-01T10:00"})
        record_service.create_record(store, "reports", {"timestamp": "2026-03-01T10:00"})
        record_service.create_record(store, "reports", {"timestamp": "2026-02-01T10:00"})

        stamps = [r["timestamp"] for r in record_service.list_records(store, "reports")]

        assert stamps == ["2026-03-01T10:00", "2026-02-01T10:00", "2026-01-01T10:00"]

    def test_create_stamps_timestamp(self, store):
        record = record_service.create_record(store, "warrants", {"targetName": "X"})

        assert record["timestamp"]
        assert store.get("warrants", record["id"])["targetName"] == "X"

    def test_search_is_case_insensitive_substring(self, store):
        record_service.create_record(store, "evidence", {"caseNumber": "BTS-1"})
        record_service.create_record(store, "evidence", {"caseNumber": "BTS-2"})

        found = record_service.list_records(
            store, "evidence", "bts-2", ("caseNumber", "itemName")
        )

        assert [r["caseNumber"] for r in found] == ["BTS-2"]

    def test_change_status_appends_history(self, store):
        record = record_service.create_record(store, "reports", {"status": "Offen"})

        record_service.change_status(
            store, "reports", record["id"], "In Bearbeitung", "PK Wolf"
        )
        updated = record_service.change_status(
            store, "reports", record["id"], "Abgeschlossen", "PK Wolf", "erledigt"
        )

        assert updated["status"] == "Abgeschlossen"
        history = updated["statusHistory"]
        assert [h["status"] for h in history] == ["In Bearbeitung", "Abgeschlossen"]
        assert history[1]["changedBy"] == "PK Wolf"
        assert history[1]["note"] == "erledigt"
        assert "note" not in history[0]

    def test_change_status_missing_record(self, store):
        result = record_service.change_status(store, "reports", "ghost", "Offen", "x")
        assert result is None

    def test_update_and_delete_missing_record(self, store):
        assert record_service.update_record(store, "reports", "ghost", {"a": 1}) is None
        assert record_service.delete_record(store, "reports", "ghost") is False


class TestReports:
    """Tests for report_service."""

    def test_report_number_format(self):
        number = report_service.generate_report_number()

        assert re.fullmatch(r"BTS-\d{6}-\d{4}", number)

    def test_file_incident_report(self, store, officer):
        report = report_service.file_report(
            store,
            ReportCreate(type="Einsatzbericht", title="Streife", content="Ruhig"),
            officer,
        )

        assert report["status"] == "Offen"
        assert report["officerName"] == "Polizeimeisterin Schmidt"
        assert report["officerBadge"] == "Falke 12/07"
        assert report["statusHistory"][0]["status"] == "Offen"

    def test_file_complaint(self, store, officer):
        report = report_service.file_report(
            store, ReportCreate(type="Strafanzeige", applicant="Max Muster"), officer
        )

        assert report["status"] == "Unbearbeitet"
        assert report["applicant"] == "Max Muster"

    def test_incident_report_requires_title_and_content(self):
        with pytest.raises(ValidationError):
            ReportCreate(type="Einsatzbericht", title="  ", content="x")

    def test_search_reports(self, store, officer):
        report_service.file_report(
            store, ReportCreate(type="Strafanzeige", applicant="Max Muster"), officer
        )
        report_service.file_report(
            store, ReportCreate(type="Strafanzeige", applicant="Erika Beispiel"), officer
        )

        assert len(report_service.list_reports(store, "muster")) == 1
        assert len(report_service.list_reports(store, "schmidt")) == 2

    def test_edit_report_changes_only_provided_fields(self, store, officer):
        report = report_service.file_report(
            store,
            ReportCreate(title="Streife", content="Ruhig", location="Hafen"),
            officer,
        )

        updated = report_service.edit_report(
            store, report["id"], ReportUpdate(content="Unruhig")
        )

        assert updated["content"] == "Unruhig"
        assert updated["location"] == "Hafen"
        assert updated["reportNumber"] == report["reportNumber"]


class TestOperations:
    """Tests for warrants, fleet and evidence."""

    def test_warrant_toggle(self, store):
        warrant = operations_service.publish_warrant(
            store, WarrantCreate(target_name="Kurt K.", reason="Raub")
        )
        assert warrant["active"] is True

        closed = operations_service.toggle_warrant(store, warrant["id"])
        reopened = operations_service.toggle_warrant(store, warrant["id"])

        assert closed["active"] is False
        assert reopened["active"] is True

    def test_new_vehicle_is_ready_and_fueled(self, store):
        vehicle = operations_service.register_vehicle(
            store, VehicleCreate(plate="BP-1234", model="Passat")
        )

        assert vehicle["status"] == "Einsatzbereit"
        assert vehicle["fuel"] == 100

    def test_vehicle_status_cycle(self, store, officer):
        vehicle = operations_service.register_vehicle(
            store, VehicleCreate(plate="BP-1234", model="Passat")
        )

        statuses = [
            operations_service.cycle_vehicle_status(store, vehicle["id"], officer)[
                "status"
            ]
            for _ in range(3)
        ]

        assert statuses == ["Im Einsatz", "Defekt", "Einsatzbereit"]
        assert store.get("fleet", vehicle["id"])["lastDriver"] == officer.display_name

    def test_cycle_missing_vehicle(self, store, officer):
        assert operations_service.cycle_vehicle_status(store, "ghost", officer) is None

    def test_evidence_records_seizing_officer(self, store, officer):
        item = operations_service.log_evidence(
            store, EvidenceCreate(case_number="BTS-1", item_name="Messer"), officer
        )

        assert item["seizedBy"] == "Polizeimeisterin Schmidt"
        assert operations_service.list_evidence(store, "messer")[0]["id"] == item["id"]


class TestIntake:
    """Tests for applications and citizen submissions."""

    @pytest.mark.parametrize(
        "career_path,position",
        [
            ("Mittlerer Dienst", "Polizeiobermeister-Anwärter"),
            ("Gehobener Dienst", "Polizeikommissar-Anwärter"),
        ],
    )
    def test_application_position(self, store, career_path, position):
        application = intake_service.submit_application(
            store,
            ApplicationCreate(
                first_name="Mia",
                last_name="Lang",
                career_path=career_path,
                motivation="Helfen",
            ),
        )

        assert application["name"] == "Mia Lang"
        assert application["position"] == position
        assert application["status"] == "Eingegangen"

    def test_tip_title_defaults_to_type(self, store):
        tip = intake_service.submit_tip(store, SubmissionCreate(type="Bürgerservice"))

        assert tip["title"] == "Bürgerservice-Anfrage"
        assert tip["status"] == "Neu"

    def test_anonymous_tip_drops_contact_data(self, store):
        tip = intake_service.submit_tip(
            store,
            SubmissionCreate(
                title="Beobachtung",
                anonymous=True,
                contact_name="Hans",
                contact_phone="555",
            ),
        )

        stored = store.get("submissions", tip["id"])
        assert "contactName" not in stored
        assert "contactPhone" not in stored


class TestCalendar:
    """Tests for calendar_service."""

    def test_private_events_are_visible_to_creator_only(self, store, officer, recruit):
        calendar_service.create_event(
            store,
            CalendarEventCreate(title="Privat", date=date(2026, 5, 2)),
            officer,
        )
        calendar_service.create_event(
            store,
            CalendarEventCreate(title="Appell", date=date(2026, 5, 1), is_public=True),
            recruit,
        )

        own = [e["title"] for e in calendar_service.list_events(store, officer)]
        other = [e["title"] for e in calendar_service.list_events(store, recruit)]

        assert own == ["Appell", "Privat"]
        assert other == ["Appell"]

    def test_event_date_is_stored_as_iso_string(self, store, officer):
        event = calendar_service.create_event(
            store, CalendarEventCreate(title="Schulung", date=date(2026, 5, 2)), officer
        )

        assert store.get("calendar", event["id"])["date"] == "2026-05-02"
        assert event["createdBy"] == officer.id

    def test_can_delete(self, officer, recruit):
        event = {"createdBy": officer.id}

        assert calendar_service.can_delete(event, officer, can_manage=False)
        assert not calendar_service.can_delete(event, recruit, can_manage=False)
        assert calendar_service.can_delete(event, recruit, can_manage=True)


class TestPress:
    """Tests for press_service."""

    def test_publish_and_edit(self, store, officer, recruit):
        release = press_service.publish_release(
            store, PressReleaseCreate(title="Festnahme", content="..."), officer
        )

        edited = press_service.edit_release(
            store, release["id"], PressReleaseUpdate(title="Festnahme am Hafen"), recruit
        )

        assert edited["title"] == "Festnahme am Hafen"
        assert edited["author"] == officer.display_name
        assert edited["lastEditedBy"] == recruit.display_name
        assert edited["lastEditedAt"]

    def test_edit_missing_release(self, store, officer):
        assert (
            press_service.edit_release(store, "ghost", PressReleaseUpdate(), officer)
            is None
        )
