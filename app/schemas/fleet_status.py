# app/schemas/fleet_status.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.models.enums import InspectionStatus
from app.schemas.forklift import ForkliftOut


class ForkliftStatusSummaryOut(BaseModel):
    forklift: ForkliftOut
    last_inspection_date: Optional[datetime]
    last_inspection_status: Optional[InspectionStatus]
    days_since_inspection: Optional[int]
    pending_defects: int

    class Config:
        from_attributes = True
