# app/services/fleet_status_service.py
"""
Supervisor dashboard: per-forklift rollup of the latest inspection and of the
defects reported in the trailing window (PENDING_DEFECT_WINDOW_DAYS, default 30).

Three queries in total, regardless of fleet size:
  1. all forklifts ordered by unit_number
  2. latest inspection per forklift (row_number over inspection_date, created_at)
  3. defect count per forklift for inspections dated inside the window
Nothing is persisted; every call recomputes from the inspection tables.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session
from app.config import settings
from app.models.daily_inspection import DailyInspection
from app.models.enums import ChecklistStatus
from app.models.forklift import Forklift
from app.models.inspection_result import InspectionResult
from app.schemas.inspection import to_naive_utc
from app.services.errors import storage_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class ForkliftStatusSummary:
    forklift: Forklift
    last_inspection_date: Optional[datetime]
    last_inspection_status: Optional[str]   # pass | fail | needs_attention
    days_since_inspection: Optional[int]
    pending_defects: int


def days_between(earlier: datetime, now: datetime) -> int:
    """Whole days elapsed, floored."""
    return int((now - earlier).total_seconds() // SECONDS_PER_DAY)


def _latest_inspections(db: Session) -> dict:
    ranked = db.query(
        DailyInspection.forklift_id.label("forklift_id"),
        DailyInspection.inspection_date.label("inspection_date"),
        DailyInspection.overall_status.label("overall_status"),
        func.row_number().over(
            partition_by=DailyInspection.forklift_id,
            order_by=(
                DailyInspection.inspection_date.desc(),
                DailyInspection.created_at.desc(),
                DailyInspection.id.desc(),
            ),
        ).label("rn"),
    ).subquery()

    rows = (
        db.query(ranked.c.forklift_id, ranked.c.inspection_date, ranked.c.overall_status)
        .filter(ranked.c.rn == 1)
        .all()
    )
    return {forklift_id: (inspection_date, status) for forklift_id, inspection_date, status in rows}


def _defect_counts(db: Session, since: datetime) -> dict:
    rows = (
        db.query(DailyInspection.forklift_id, func.count(InspectionResult.id))
        .join(InspectionResult, InspectionResult.inspection_id == DailyInspection.id)
        .filter(
            InspectionResult.status == ChecklistStatus.DEFECT.value,
            DailyInspection.inspection_date >= since,
        )
        .group_by(DailyInspection.forklift_id)
        .all()
    )
    return {forklift_id: int(count) for forklift_id, count in rows}


def get_fleet_status_summary(db: Session, now: Optional[datetime] = None) -> list[ForkliftStatusSummary]:
    """One summary per forklift, ascending by unit_number. An aware `now` is read as UTC."""
    now = to_naive_utc(now) if now else datetime.utcnow()
    since = now - timedelta(days=settings.PENDING_DEFECT_WINDOW_DAYS)

    with storage_errors(db, "build fleet status summary"):
        forklifts = db.query(Forklift).order_by(Forklift.unit_number.asc()).all()
        latest = _latest_inspections(db)
        defects = _defect_counts(db, since)

    summaries = []
    for forklift in forklifts:
        last_date, last_status = latest.get(forklift.id, (None, None))
        summaries.append(ForkliftStatusSummary(
            forklift=forklift,
            last_inspection_date=last_date,
            last_inspection_status=last_status,
            days_since_inspection=days_between(last_date, now) if last_date else None,
            pending_defects=defects.get(forklift.id, 0),
        ))

    overdue = sum(1 for s in summaries if s.days_since_inspection is None or s.days_since_inspection >= 1)
    logger.debug(f"[FLEET] {len(summaries)} forklifts | {overdue} without an inspection in the last 24h")
    return summaries
