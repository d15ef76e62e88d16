# app/routers/forklifts.py
"""Forklift registry — list, register, change lifecycle status."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.models.enums import ForkliftStatus
from app.schemas.forklift import ForkliftCreate, ForkliftOut, ForkliftStatusUpdate
from app.services.forklift_service import list_forklifts, create_forklift, update_forklift_status

router = APIRouter()


@router.get("/forklifts", response_model=list[ForkliftOut], summary="List forklifts")
def get_forklifts(status: Optional[ForkliftStatus] = None, db: Session = Depends(get_db)):
    return list_forklifts(db, status)


@router.post("/forklifts", response_model=ForkliftOut, status_code=status.HTTP_201_CREATED,
             summary="Register a forklift")
def register_forklift(body: ForkliftCreate, db: Session = Depends(get_db)):
    return create_forklift(db, body)


@router.put("/forklifts/{forklift_id}/status", response_model=ForkliftOut, summary="Change forklift status")
def set_forklift_status(forklift_id: int, body: ForkliftStatusUpdate, db: Session = Depends(get_db)):
    return update_forklift_status(db, forklift_id, body.status)
