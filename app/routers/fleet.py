# app/routers/fleet.py
"""Supervisor dashboard — fleet status summary."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.fleet_status import ForkliftStatusSummaryOut
from app.services.fleet_status_service import get_fleet_status_summary

router = APIRouter()


@router.get("/fleet/status", response_model=list[ForkliftStatusSummaryOut],
            summary="Latest inspection + pending defects per forklift")
def fleet_status(db: Session = Depends(get_db)):
    """
    One row per forklift, ordered by unit number. pending_defects counts defect
    results from inspections dated within the last PENDING_DEFECT_WINDOW_DAYS.
    """
    return [ForkliftStatusSummaryOut.model_validate(s) for s in get_fleet_status_summary(db)]
