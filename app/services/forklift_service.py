# app/services/forklift_service.py
"""Forklift registry: register, list (optionally by status) and change status."""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.enums import ForkliftStatus
from app.models.forklift import Forklift
from app.schemas.forklift import ForkliftCreate
from app.services.errors import ConflictError, NotFoundError, storage_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def list_forklifts(db: Session, status: Optional[ForkliftStatus] = None) -> list[Forklift]:
    with storage_errors(db, "list forklifts"):
        q = db.query(Forklift)
        if status:
            q = q.filter(Forklift.status == status.value)
        return q.order_by(Forklift.unit_number.asc()).all()


def create_forklift(db: Session, body: ForkliftCreate) -> Forklift:
    """Register a forklift. unit_number and serial_number must both be unused."""
    with storage_errors(db, "register forklift"):
        existing = db.query(Forklift).filter(or_(
            Forklift.unit_number == body.unit_number,
            Forklift.serial_number == body.serial_number,
        )).first()
        if existing:
            field = "Unit" if existing.unit_number == body.unit_number else "Serial number"
            value = body.unit_number if field == "Unit" else body.serial_number
            raise ConflictError(f"{field} {value} already registered")

        forklift = Forklift(
            unit_number=body.unit_number,
            brand=body.brand,
            model=body.model,
            year=body.year,
            serial_number=body.serial_number,
            status=body.status.value,
        )
        db.add(forklift)
        db.commit()
        db.refresh(forklift)
    logger.info(f"[FORKLIFTS] Registered {forklift.unit_number} ({forklift.brand} {forklift.model})")
    return forklift


def update_forklift_status(db: Session, forklift_id: int, status: ForkliftStatus) -> Forklift:
    with storage_errors(db, "update forklift status"):
        forklift = db.query(Forklift).filter(Forklift.id == forklift_id).first()
        if not forklift:
            raise NotFoundError("Forklift", forklift_id)
        previous = forklift.status
        forklift.status = status.value
        db.commit()
        db.refresh(forklift)
    logger.info(f"[FORKLIFTS] {forklift.unit_number}: {previous} → {forklift.status}")
    return forklift
