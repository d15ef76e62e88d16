# app/schemas/checklist_item.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class ChecklistItemCreate(BaseModel):
    category: str = Field(min_length=1, max_length=100)
    item_name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    is_active: bool = True

    class Config:
        str_strip_whitespace = True


class ChecklistItemActiveUpdate(BaseModel):
    is_active: bool


class ChecklistItemOut(BaseModel):
    id: int
    category: str
    item_name: str
    description: Optional[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
