# app/models/forklift.py
"""
Forklift registry. unit_number and serial_number are both unique.
Status is changed by supervisors (active | maintenance | inactive).
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base


class Forklift(Base):
    __tablename__ = "forklifts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    unit_number = Column(String(50), unique=True, nullable=False, index=True)
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    serial_number = Column(String(100), unique=True, nullable=False)
    status = Column(String(20), default="active", nullable=False)  # active | maintenance | inactive
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    inspections = relationship("DailyInspection", back_populates="forklift")

    def __repr__(self):
        return f"<Forklift {self.unit_number} {self.brand} {self.model} status={self.status}>"
