# scripts/setup/init_db.py
"""
Initialize database — creates all tables and seeds the default checklist.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--no-seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine, SessionLocal
from app.config import settings
from app.models.checklist_item import ChecklistItem
from sqlalchemy import text, inspect

# (category, item_name, description)
DEFAULT_CHECKLIST = [
    ("Safety", "Seatbelt", "Belt latches and retracts, webbing not frayed"),
    ("Safety", "Horn", "Horn sounds clearly"),
    ("Safety", "Lights & Beacon", "Head lights, tail lights and warning beacon work"),
    ("Safety", "Backup Alarm", "Alarm sounds when reversing"),
    ("Safety", "Overhead Guard", "No cracks, bends or missing bolts"),
    ("Brakes", "Service Brake", "Pedal firm, stops within normal distance"),
    ("Brakes", "Parking Brake", "Holds truck on incline"),
    ("Engine", "Oil Level", "Engine oil between min and max marks"),
    ("Engine", "Coolant Level", "Coolant visible in overflow reservoir"),
    ("Engine", "Fuel / Battery", "No leaks; battery connectors clean and secure"),
    ("Hydraulics", "Hydraulic Fluid", "Fluid level correct, no leaks at cylinders or hoses"),
    ("Hydraulics", "Mast & Chains", "Mast moves smoothly; chains lubricated and undamaged"),
    ("Hydraulics", "Forks", "No cracks or bends; locking pins in place"),
    ("Tyres", "Tyres & Wheels", "No chunks missing, wheel nuts tight"),
    ("Controls", "Steering", "No excessive play, returns freely"),
    ("Controls", "Lift / Tilt Controls", "Levers return to neutral, labels legible"),
]


def seed_checklist():
    db = SessionLocal()
    try:
        if db.query(ChecklistItem).count():
            print("ℹ️  Checklist already seeded — skipped")
            return
        for category, item_name, description in DEFAULT_CHECKLIST:
            db.add(ChecklistItem(category=category, item_name=item_name,
                                 description=description, is_active=True))
        db.commit()
        print(f"✅ Seeded {len(DEFAULT_CHECKLIST)} checklist items")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create tables and seed the default checklist")
    parser.add_argument("--no-seed", action="store_true", help="Only create tables")
    args = parser.parse_args()

    print("🗄️  Forklift Inspection DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running:")
        print("  docker-compose up -d db")
        print("  # or: sudo systemctl start postgresql")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    print("✅ All tables created")

    if not args.no_seed:
        seed_checklist()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
