# app/routers/checklist.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.checklist_item import ChecklistItemCreate, ChecklistItemOut, ChecklistItemActiveUpdate
from app.services.checklist_service import (
    list_checklist_items, create_checklist_item, set_checklist_item_active,
)

router = APIRouter()


@router.get("/checklist-items", response_model=list[ChecklistItemOut], summary="Checklist items")
def get_checklist_items(include_inactive: bool = False, db: Session = Depends(get_db)):
    """Active items only unless include_inactive=true. Ordered by category, then name."""
    return list_checklist_items(db, include_inactive)


@router.post("/checklist-items", response_model=ChecklistItemOut, status_code=status.HTTP_201_CREATED,
             summary="Add a checklist item")
def add_checklist_item(body: ChecklistItemCreate, db: Session = Depends(get_db)):
    return create_checklist_item(db, body)


@router.put("/checklist-items/{item_id}/active", response_model=ChecklistItemOut,
            summary="Enable or soft-disable a checklist item")
def set_item_active(item_id: int, body: ChecklistItemActiveUpdate, db: Session = Depends(get_db)):
    return set_checklist_item_active(db, item_id, body.is_active)
