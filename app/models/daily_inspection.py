# app/models/daily_inspection.py
"""
Daily inspections — one operator's checklist run on one forklift for one shift.
overall_status is derived from the results by inspection_service; rows are
never updated after creation.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class DailyInspection(Base):
    __tablename__ = "daily_inspections"
    __table_args__ = (
        CheckConstraint("fuel_level IS NULL OR (fuel_level >= 0 AND fuel_level <= 100)",
                        name="ck_daily_inspections_fuel_level"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    forklift_id = Column(Integer, ForeignKey("forklifts.id"), nullable=False, index=True)
    operator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    inspection_date = Column(DateTime, nullable=False, index=True)
    shift = Column(String(20), nullable=False)            # morning | afternoon | night
    hours_meter = Column(Numeric(10, 2))
    fuel_level = Column(Integer)                          # 0-100 percentage
    overall_status = Column(String(20), nullable=False, index=True)  # pass | fail | needs_attention
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    forklift = relationship("Forklift", back_populates="inspections")
    operator = relationship("User", back_populates="inspections")
    results = relationship("InspectionResult", back_populates="inspection",
                           order_by="InspectionResult.id")

    def __repr__(self):
        return f"<DailyInspection {self.id} forklift={self.forklift_id} status={self.overall_status}>"
