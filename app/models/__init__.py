# Forklift Inspections — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.user import User                           # noqa
from app.models.forklift import Forklift                   # noqa
from app.models.checklist_item import ChecklistItem        # noqa
from app.models.daily_inspection import DailyInspection    # noqa
from app.models.inspection_result import InspectionResult  # noqa
