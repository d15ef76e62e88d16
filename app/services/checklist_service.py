# app/services/checklist_service.py
"""
Checklist catalog. Inactive items are hidden from new inspections but stay
in the table so historical results keep resolving.
"""

from sqlalchemy.orm import Session
from app.models.checklist_item import ChecklistItem
from app.schemas.checklist_item import ChecklistItemCreate
from app.services.errors import NotFoundError, storage_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def list_checklist_items(db: Session, include_inactive: bool = False) -> list[ChecklistItem]:
    with storage_errors(db, "list checklist items"):
        q = db.query(ChecklistItem)
        if not include_inactive:
            q = q.filter(ChecklistItem.is_active.is_(True))
        return q.order_by(ChecklistItem.category.asc(), ChecklistItem.item_name.asc()).all()


def create_checklist_item(db: Session, body: ChecklistItemCreate) -> ChecklistItem:
    with storage_errors(db, "create checklist item"):
        item = ChecklistItem(
            category=body.category,
            item_name=body.item_name,
            description=body.description,
            is_active=body.is_active,
        )
        db.add(item)
        db.commit()
        db.refresh(item)
    logger.info(f"[CHECKLIST] Added {item.category}/{item.item_name}")
    return item


def set_checklist_item_active(db: Session, item_id: int, is_active: bool) -> ChecklistItem:
    """Enable or soft-disable a checklist item. Items are never deleted."""
    with storage_errors(db, "update checklist item"):
        item = db.query(ChecklistItem).filter(ChecklistItem.id == item_id).first()
        if not item:
            raise NotFoundError("Checklist item", item_id)
        item.is_active = is_active
        db.commit()
        db.refresh(item)
    logger.info(f"[CHECKLIST] {item.category}/{item.item_name} active={item.is_active}")
    return item
