# app/schemas/forklift.py
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from app.models.enums import ForkliftStatus

MIN_FORKLIFT_YEAR = 1900


class ForkliftCreate(BaseModel):
    unit_number: str = Field(min_length=1, max_length=50)
    brand: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int
    serial_number: str = Field(min_length=1, max_length=100)
    status: ForkliftStatus = ForkliftStatus.ACTIVE

    @field_validator("year")
    @classmethod
    def year_in_range(cls, v: int) -> int:
        latest = datetime.utcnow().year + 1
        if not MIN_FORKLIFT_YEAR <= v <= latest:
            raise ValueError(f"year must be between {MIN_FORKLIFT_YEAR} and {latest}")
        return v

    class Config:
        str_strip_whitespace = True


class ForkliftStatusUpdate(BaseModel):
    status: ForkliftStatus


class ForkliftOut(BaseModel):
    id: int
    unit_number: str
    brand: str
    model: str
    year: int
    serial_number: str
    status: ForkliftStatus
    created_at: datetime

    class Config:
        from_attributes = True


class ForkliftRef(BaseModel):
    """Identifying fields shown next to an inspection."""
    unit_number: str
    brand: str
    model: str

    class Config:
        from_attributes = True
