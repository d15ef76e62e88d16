# app/models/user.py
"""
Users table — operators, mechanics and supervisors.
Created by supervisors; never deleted (inspections reference operator_id).
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    full_name = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False)  # operator | mechanic | supervisor
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    inspections = relationship("DailyInspection", back_populates="operator")

    def __repr__(self):
        return f"<User {self.username} role={self.role}>"
