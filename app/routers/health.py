# app/routers/health.py
"""Liveness plus a SELECT 1 against the inspection database."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app.database import get_db
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="Backend and database health")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except SQLAlchemyError as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
