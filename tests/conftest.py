# tests/conftest.py
"""
Shared fixtures: an in-memory SQLite database per test, a session bound to it,
a TestClient whose real get_db dependency hands out sessions on that database,
and factories for seeding rows directly (including states the API never
produces, such as needs_attention inspections or back-dated ones).
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before anything imports app.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = ""

import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import database
from app.database import Base, enable_sqlite_foreign_keys
from app.models import User, Forklift, ChecklistItem, DailyInspection, InspectionResult
from app.main import app as fastapi_app


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(test_engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, monkeypatch):
    monkeypatch.setattr(database, "SessionLocal", session_factory)
    return TestClient(fastapi_app)


@pytest.fixture
def make_user(db_session):
    """Factory fixture for creating users."""
    counter = {"n": 0}

    def _make_user(role: str = "operator", **kwargs) -> User:
        counter["n"] += 1
        user = User(
            username=kwargs.get("username", f"{role}{counter['n']}"),
            full_name=kwargs.get("full_name", f"Test {role.title()} {counter['n']}"),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_forklift(db_session):
    """Factory fixture for creating forklifts."""
    def _make_forklift(unit_number: str = "FL001", **kwargs) -> Forklift:
        forklift = Forklift(
            unit_number=unit_number,
            brand=kwargs.get("brand", "Toyota"),
            model=kwargs.get("model", "8FGU25"),
            year=kwargs.get("year", 2021),
            serial_number=kwargs.get("serial_number", f"SN-{unit_number}"),
            status=kwargs.get("status", "active"),
        )
        db_session.add(forklift)
        db_session.commit()
        db_session.refresh(forklift)
        return forklift

    return _make_forklift


@pytest.fixture
def make_checklist_item(db_session):
    """Factory fixture for creating checklist items."""
    def _make_checklist_item(item_name: str = "Brakes", category: str = "Safety", **kwargs) -> ChecklistItem:
        item = ChecklistItem(
            category=category,
            item_name=item_name,
            description=kwargs.get("description", f"Check {item_name.lower()}"),
            is_active=kwargs.get("is_active", True),
        )
        db_session.add(item)
        db_session.commit()
        db_session.refresh(item)
        return item

    return _make_checklist_item


@pytest.fixture
def make_inspection(db_session):
    """
    Factory fixture inserting an inspection row directly, bypassing the recorder.
    `results` is a list of (checklist_item_id, status) tuples.
    """
    def _make_inspection(forklift, operator, inspection_date: datetime,
                         overall_status: str = "pass", results=(), **kwargs) -> DailyInspection:
        inspection = DailyInspection(
            forklift_id=forklift.id,
            operator_id=operator.id,
            inspection_date=inspection_date,
            shift=kwargs.get("shift", "morning"),
            hours_meter=kwargs.get("hours_meter", Decimal("100.50")),
            fuel_level=kwargs.get("fuel_level", 75),
            overall_status=overall_status,
            notes=kwargs.get("notes"),
        )
        if "created_at" in kwargs:
            inspection.created_at = kwargs["created_at"]
        db_session.add(inspection)
        db_session.flush()
        for checklist_item_id, status in results:
            db_session.add(InspectionResult(
                inspection_id=inspection.id,
                checklist_item_id=checklist_item_id,
                status=status,
            ))
        db_session.commit()
        db_session.refresh(inspection)
        return inspection

    return _make_inspection
