# app/routers/users.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import UserCreate, UserOut, UserCapabilitiesOut
from app.services.user_service import create_user, list_users, get_user_capabilities

router = APIRouter()


@router.get("/users", response_model=list[UserOut], summary="List users")
def get_users(db: Session = Depends(get_db)):
    return list_users(db)


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Create a user")
def add_user(body: UserCreate, db: Session = Depends(get_db)):
    return create_user(db, body)


@router.get("/users/{user_id}/capabilities", response_model=UserCapabilitiesOut,
            summary="What the selected user's role may see and do")
def user_capabilities(user_id: int, db: Session = Depends(get_db)):
    user, capabilities = get_user_capabilities(db, user_id)
    return UserCapabilitiesOut(user_id=user.id, role=user.role, capabilities=capabilities)
