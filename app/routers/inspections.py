# app/routers/inspections.py
"""Daily inspections — record (operators), history + detail (mechanics, supervisors)."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional
from app.database import get_db
from app.models.enums import InspectionStatus
from app.schemas.inspection import (
    DailyInspectionCreate, DailyInspectionOut, InspectionDetailOut, InspectionHistoryQuery,
)
from app.services.inspection_service import record_inspection, query_history, get_inspection_detail

router = APIRouter()


@router.post("/inspections", response_model=DailyInspectionOut, status_code=status.HTTP_201_CREATED,
             summary="Record a daily inspection")
def create_inspection(body: DailyInspectionCreate, db: Session = Depends(get_db)):
    """
    Stores the inspection and every checklist result in one transaction.
    overall_status is computed server-side: any defect → fail, otherwise pass.
    """
    return record_inspection(db, body)


@router.get("/inspections", response_model=list[DailyInspectionOut], summary="Inspection history")
def get_inspection_history(
    forklift_id: Optional[int] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    status: Optional[InspectionStatus] = None,
    db: Session = Depends(get_db),
):
    """Newest first. Date bounds are inclusive; omitted filters match everything."""
    query = InspectionHistoryQuery(
        forklift_id=forklift_id, start_date=start_date, end_date=end_date, status=status,
    )
    return query_history(db, query)


@router.get("/inspections/{inspection_id}", response_model=InspectionDetailOut,
            summary="Inspection with forklift, operator and checklist results")
def get_inspection(inspection_id: int, db: Session = Depends(get_db)):
    inspection = get_inspection_detail(db, inspection_id)
    if not inspection:
        raise HTTPException(status_code=404, detail=f"Inspection {inspection_id} not found")
    return inspection
