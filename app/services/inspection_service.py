# app/services/inspection_service.py
"""
Daily inspections: recording, history queries and detail lookup.

How recording works:
  - forklift, operator and every referenced checklist item must exist → else NotFoundError
  - overall_status is derived from the results (any defect → fail, otherwise pass)
  - inspection row is flushed for its id, result rows are added, then ONE commit
    → either everything is stored or nothing is
"""

from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session, joinedload, selectinload
from app.models.checklist_item import ChecklistItem
from app.models.daily_inspection import DailyInspection
from app.models.enums import ChecklistStatus, InspectionStatus
from app.models.forklift import Forklift
from app.models.inspection_result import InspectionResult
from app.models.user import User
from app.schemas.inspection import DailyInspectionCreate, InspectionHistoryQuery
from app.services.errors import NotFoundError, ValidationError, storage_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def derive_overall_status(result_statuses: Iterable[ChecklistStatus]) -> InspectionStatus:
    """
    Inspection verdict from its checklist outcomes. Never yields needs_attention:
    that value is only ever stored by paths outside the recorder.
    """
    if any(ChecklistStatus(s) == ChecklistStatus.DEFECT for s in result_statuses):
        return InspectionStatus.FAIL
    return InspectionStatus.PASS


def _ensure_references_exist(db: Session, payload: DailyInspectionCreate):
    if db.query(Forklift).filter(Forklift.id == payload.forklift_id).first() is None:
        raise NotFoundError("Forklift", payload.forklift_id)

    if db.query(User).filter(User.id == payload.operator_id).first() is None:
        raise NotFoundError("User", payload.operator_id)

    wanted_ids = {r.checklist_item_id for r in payload.checklist_results}
    if not wanted_ids:
        return
    found_ids = {
        row[0] for row in
        db.query(ChecklistItem.id).filter(ChecklistItem.id.in_(wanted_ids)).all()
    }
    missing = sorted(wanted_ids - found_ids)
    if missing:
        raise NotFoundError("Checklist item", missing[0])


def record_inspection(db: Session, payload: DailyInspectionCreate) -> DailyInspection:
    """Persist an inspection and all of its checklist results atomically."""
    with storage_errors(db, "record inspection"):
        try:
            _ensure_references_exist(db, payload)
        except NotFoundError as e:
            logger.warning(f"[INSPECTION] Rejected: {e}")
            raise

        overall_status = derive_overall_status(r.status for r in payload.checklist_results)

        inspection = DailyInspection(
            forklift_id=payload.forklift_id,
            operator_id=payload.operator_id,
            inspection_date=payload.inspection_date,
            shift=payload.shift.value,
            hours_meter=Decimal(str(payload.hours_meter)) if payload.hours_meter is not None else None,
            fuel_level=payload.fuel_level,
            overall_status=overall_status.value,
            notes=payload.notes,
        )
        db.add(inspection)
        db.flush()  # assigns inspection.id inside the open transaction

        for result in payload.checklist_results:
            db.add(InspectionResult(
                inspection_id=inspection.id,
                checklist_item_id=result.checklist_item_id,
                status=result.status.value,
                notes=result.notes,
            ))

        db.commit()
        db.refresh(inspection)

    defects = sum(1 for r in payload.checklist_results if r.status == ChecklistStatus.DEFECT)
    logger.info(
        f"[INSPECTION] #{inspection.id} forklift={payload.forklift_id} "
        f"operator={payload.operator_id} shift={payload.shift.value} "
        f"results={len(payload.checklist_results)} defects={defects} → {overall_status.value}"
    )
    return inspection


def query_history(db: Session, query: InspectionHistoryQuery) -> list[DailyInspection]:
    """Inspections matching every supplied filter, newest inspection_date first."""
    if query.start_date and query.end_date and query.start_date > query.end_date:
        raise ValidationError("start_date must not be after end_date")

    with storage_errors(db, "query inspection history"):
        q = db.query(DailyInspection)
        if query.forklift_id is not None:
            q = q.filter(DailyInspection.forklift_id == query.forklift_id)
        if query.start_date is not None:
            q = q.filter(DailyInspection.inspection_date >= query.start_date)
        if query.end_date is not None:
            q = q.filter(DailyInspection.inspection_date <= query.end_date)
        if query.status is not None:
            q = q.filter(DailyInspection.overall_status == query.status.value)
        return q.order_by(
            DailyInspection.inspection_date.desc(),
            DailyInspection.created_at.desc(),
        ).all()


def get_inspection_detail(db: Session, inspection_id: int) -> Optional[DailyInspection]:
    """
    Inspection with its forklift, operator and results (each with its checklist
    item) loaded. Returns None when the id does not exist.
    """
    with storage_errors(db, "load inspection detail"):
        return (
            db.query(DailyInspection)
            .options(
                joinedload(DailyInspection.forklift),
                joinedload(DailyInspection.operator),
                selectinload(DailyInspection.results).joinedload(InspectionResult.checklist_item),
            )
            .filter(DailyInspection.id == inspection_id)
            .first()
        )
