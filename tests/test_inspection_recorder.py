# tests/test_inspection_recorder.py
"""Unit tests for the inspection recorder — rejection paths, status derivation, store failures."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from datetime import datetime
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from app.models.enums import ChecklistStatus, InspectionStatus
from app.schemas.inspection import DailyInspectionCreate
from app.services.errors import NotFoundError, ConflictError, StorageError, StorageTimeoutError
from app.services.inspection_service import derive_overall_status, record_inspection


def make_payload(results=None, **overrides):
    data = {
        "forklift_id": 1,
        "operator_id": 1,
        "inspection_date": datetime(2024, 1, 15, 8, 0),
        "shift": "morning",
        "hours_meter": 1250.5,
        "fuel_level": 85,
        "notes": "Regular morning inspection",
        "checklist_results": results if results is not None else [
            {"checklist_item_id": 1, "status": "ok"},
            {"checklist_item_id": 2, "status": "ok"},
        ],
    }
    data.update(overrides)
    return DailyInspectionCreate(**data)


def make_db(existing_item_ids=(1, 2), forklift_exists=True, operator_exists=True):
    """MagicMock session whose lookups answer per queried entity."""
    db = MagicMock()
    lookups = iter([MagicMock() if forklift_exists else None,
                    MagicMock() if operator_exists else None])
    db.query.return_value.filter.return_value.first.side_effect = lambda: next(lookups)
    db.query.return_value.filter.return_value.all.return_value = [(i,) for i in existing_item_ids]
    return db


class _CanceledByServer(Exception):
    pgcode = "57014"


class _ForeignKeyViolation(Exception):
    pgcode = "23503"


class TestDeriveOverallStatus:
    def test_any_defect_fails(self):
        statuses = [ChecklistStatus.OK, ChecklistStatus.DEFECT, ChecklistStatus.NOT_APPLICABLE]
        assert derive_overall_status(statuses) == InspectionStatus.FAIL

    def test_no_defect_passes(self):
        assert derive_overall_status([ChecklistStatus.OK, ChecklistStatus.NOT_APPLICABLE]) == InspectionStatus.PASS

    def test_zero_results_pass(self):
        assert derive_overall_status([]) == InspectionStatus.PASS

    def test_not_applicable_only_is_still_pass(self):
        assert derive_overall_status(["not_applicable", "not_applicable"]) == InspectionStatus.PASS


class TestRecordInspection:
    def test_missing_forklift_writes_nothing(self):
        db = make_db(forklift_exists=False)

        with pytest.raises(NotFoundError) as exc:
            record_inspection(db, make_payload())

        assert exc.value.entity == "Forklift"
        db.add.assert_not_called()
        db.commit.assert_not_called()

    def test_missing_operator_writes_nothing(self):
        db = make_db(operator_exists=False)

        with pytest.raises(NotFoundError) as exc:
            record_inspection(db, make_payload())

        assert exc.value.entity == "User"
        db.add.assert_not_called()
        db.commit.assert_not_called()

    def test_missing_checklist_item_writes_nothing(self):
        db = make_db(existing_item_ids=(1,))
        payload = make_payload([
            {"checklist_item_id": 1, "status": "ok"},
            {"checklist_item_id": 99, "status": "defect"},
        ])

        with pytest.raises(NotFoundError) as exc:
            record_inspection(db, payload)

        assert exc.value.entity_id == 99
        db.add.assert_not_called()
        db.flush.assert_not_called()
        db.commit.assert_not_called()

    def test_inspection_and_results_committed_once(self):
        db = make_db()

        inspection = record_inspection(db, make_payload([
            {"checklist_item_id": 1, "status": "ok"},
            {"checklist_item_id": 2, "status": "defect", "notes": "Leaking hose"},
        ]))

        assert inspection.overall_status == "fail"
        assert db.add.call_count == 3          # inspection + 2 results
        db.flush.assert_called_once()
        db.commit.assert_called_once()

    def test_overall_status_ignores_caller(self):
        db = make_db()
        inspection = record_inspection(db, make_payload(overall_status="fail"))
        assert inspection.overall_status == "pass"

    def test_zero_results_skips_item_lookup(self):
        db = make_db(existing_item_ids=())

        inspection = record_inspection(db, make_payload(results=[]))

        assert inspection.overall_status == "pass"
        db.add.assert_called_once()
        db.commit.assert_called_once()

    def test_storage_failure_rolls_back(self):
        db = make_db()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("connection reset"))

        with pytest.raises(StorageError):
            record_inspection(db, make_payload())

        db.rollback.assert_called_once()

    def test_statement_timeout_surfaces_as_timeout(self):
        db = make_db()
        db.flush.side_effect = OperationalError("INSERT", {}, _CanceledByServer("canceling statement"))

        with pytest.raises(StorageTimeoutError):
            record_inspection(db, make_payload())

        db.commit.assert_not_called()
        db.rollback.assert_called_once()

    def test_integrity_error_becomes_conflict(self):
        db = make_db()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with pytest.raises(ConflictError):
            record_inspection(db, make_payload())

        db.rollback.assert_called_once()

    def test_foreign_key_violation_becomes_not_found(self):
        # Forklift deleted between the existence check and the commit
        db = make_db()
        db.commit.side_effect = IntegrityError("INSERT", {}, _ForeignKeyViolation("violates foreign key"))

        with pytest.raises(NotFoundError):
            record_inspection(db, make_payload())

        db.rollback.assert_called_once()


class TestHoursMeterBounds:
    def test_largest_storable_value_accepted(self):
        assert make_payload(hours_meter=99_999_999.99).hours_meter == 99_999_999.99

    @pytest.mark.parametrize("value", [1e12, 100_000_000, float("inf"), float("nan")])
    def test_unstorable_values_rejected(self, value):
        with pytest.raises(SchemaValidationError):
            make_payload(hours_meter=value)
