# app/schemas/user.py
from pydantic import BaseModel, Field
from datetime import datetime

from app.models.enums import UserRole


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=100)
    full_name: str = Field(min_length=1, max_length=200)
    role: UserRole

    class Config:
        str_strip_whitespace = True


class UserOut(BaseModel):
    id: int
    username: str
    full_name: str
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class UserCapabilitiesOut(BaseModel):
    user_id: int
    role: UserRole
    capabilities: list[str]
