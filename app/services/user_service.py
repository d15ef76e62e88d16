# app/services/user_service.py
"""
User directory: create/list users and resolve a user's role capabilities.
Used by the users router.
"""

from typing import Optional

from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.errors import ConflictError, NotFoundError, storage_errors
from app.services.roles import capabilities_for
from app.utils.logger import get_logger

logger = get_logger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    """Find a user by id. Returns None if not found."""
    return db.query(User).filter(User.id == user_id).first()


def list_users(db: Session) -> list[User]:
    with storage_errors(db, "list users"):
        return db.query(User).order_by(User.id.asc()).all()


def create_user(db: Session, body: UserCreate) -> User:
    with storage_errors(db, "create user"):
        if db.query(User).filter(User.username == body.username).first():
            raise ConflictError(f"Username {body.username} already exists")
        user = User(username=body.username, full_name=body.full_name, role=body.role.value)
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info(f"[USERS] Created {user.username} ({user.role})")
    return user


def get_user_capabilities(db: Session, user_id: int) -> tuple[User, list[str]]:
    with storage_errors(db, "load user"):
        user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user, sorted(c.value for c in capabilities_for(user.role))
