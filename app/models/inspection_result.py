# app/models/inspection_result.py
"""
Per-item outcome within a daily inspection (ok | defect | not_applicable).
Only ever written together with its parent inspection.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class InspectionResult(Base):
    __tablename__ = "inspection_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inspection_id = Column(Integer, ForeignKey("daily_inspections.id"), nullable=False, index=True)
    checklist_item_id = Column(Integer, ForeignKey("checklist_items.id"), nullable=False)
    status = Column(String(20), nullable=False, index=True)  # ok | defect | not_applicable
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    inspection = relationship("DailyInspection", back_populates="results")
    checklist_item = relationship("ChecklistItem")

    def __repr__(self):
        return f"<InspectionResult {self.id} inspection={self.inspection_id} status={self.status}>"
