# app/models/enums.py
"""
Domain vocabularies shared by ORM models, pydantic schemas and services.
Stored as plain strings in the database (the enum value).
"""

import enum


class UserRole(str, enum.Enum):
    OPERATOR = "operator"
    MECHANIC = "mechanic"
    SUPERVISOR = "supervisor"


class ForkliftStatus(str, enum.Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"


class Shift(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"


class InspectionStatus(str, enum.Enum):
    PASS = "pass"
    FAIL = "fail"
    NEEDS_ATTENTION = "needs_attention"   # valid stored value; never derived by the recorder


class ChecklistStatus(str, enum.Enum):
    OK = "ok"
    DEFECT = "defect"
    NOT_APPLICABLE = "not_applicable"
