# app/schemas/inspection.py
"""Request/response models for daily inspections and their checklist results."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from app.models.enums import Shift, InspectionStatus, ChecklistStatus
from app.schemas.forklift import ForkliftRef

# Largest value a numeric(10, 2) column holds
HOURS_METER_MAX = 99_999_999.99


def _meter_to_float(v):
    # Numeric(10, 2) columns come back as Decimal
    if isinstance(v, Decimal):
        return float(round(v, 2))
    return v


def to_naive_utc(v: Optional[datetime]) -> Optional[datetime]:
    # Timestamps are stored as naive UTC
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class ChecklistResultIn(BaseModel):
    checklist_item_id: int
    status: ChecklistStatus
    notes: Optional[str] = None


class DailyInspectionCreate(BaseModel):
    forklift_id: int
    operator_id: int
    inspection_date: datetime
    shift: Shift
    hours_meter: Optional[float] = Field(default=None, ge=0, le=HOURS_METER_MAX, allow_inf_nan=False)
    fuel_level: Optional[int] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None
    checklist_results: list[ChecklistResultIn] = Field(default_factory=list)

    @field_validator("inspection_date")
    @classmethod
    def date_as_naive_utc(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class DailyInspectionOut(BaseModel):
    id: int
    forklift_id: int
    operator_id: int
    inspection_date: datetime
    shift: Shift
    hours_meter: Optional[float]
    fuel_level: Optional[int]
    overall_status: InspectionStatus
    notes: Optional[str]
    created_at: datetime

    @field_validator("hours_meter", mode="before")
    @classmethod
    def meter_as_float(cls, v):
        return _meter_to_float(v)

    class Config:
        from_attributes = True


class InspectionHistoryQuery(BaseModel):
    forklift_id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[InspectionStatus] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def bounds_as_naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class ChecklistItemRef(BaseModel):
    category: str
    item_name: str
    description: Optional[str]

    class Config:
        from_attributes = True


class InspectionResultDetailOut(BaseModel):
    id: int
    inspection_id: int
    checklist_item_id: int
    status: ChecklistStatus
    notes: Optional[str]
    created_at: datetime
    checklist_item: ChecklistItemRef

    class Config:
        from_attributes = True


class OperatorRef(BaseModel):
    full_name: str
    username: str

    class Config:
        from_attributes = True


class InspectionDetailOut(DailyInspectionOut):
    forklift: ForkliftRef
    operator: OperatorRef
    results: list[InspectionResultDetailOut]
