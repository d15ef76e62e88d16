# app/services/roles.py
"""
Role → capability map. Each role is a closed set of read/write capabilities;
the UI asks for a user's capabilities instead of comparing role strings.
Nothing here is enforced server-side (login is a trusted role selection).
"""

import enum

from app.models.enums import UserRole


class Capability(str, enum.Enum):
    RECORD_INSPECTION = "record_inspection"
    VIEW_CHECKLIST = "view_checklist"
    VIEW_FORKLIFTS = "view_forklifts"
    VIEW_HISTORY = "view_history"
    VIEW_INSPECTION_DETAIL = "view_inspection_detail"
    VIEW_FLEET_STATUS = "view_fleet_status"
    MANAGE_USERS = "manage_users"
    MANAGE_FORKLIFTS = "manage_forklifts"
    MANAGE_CHECKLIST = "manage_checklist"


_MECHANIC = frozenset({
    Capability.VIEW_CHECKLIST,
    Capability.VIEW_FORKLIFTS,
    Capability.VIEW_HISTORY,
    Capability.VIEW_INSPECTION_DETAIL,
})

ROLE_CAPABILITIES: dict[UserRole, frozenset] = {
    UserRole.OPERATOR: frozenset({
        Capability.RECORD_INSPECTION,
        Capability.VIEW_CHECKLIST,
        Capability.VIEW_FORKLIFTS,
    }),
    UserRole.MECHANIC: _MECHANIC,
    UserRole.SUPERVISOR: _MECHANIC | {
        Capability.VIEW_FLEET_STATUS,
        Capability.MANAGE_USERS,
        Capability.MANAGE_FORKLIFTS,
        Capability.MANAGE_CHECKLIST,
    },
}


def capabilities_for(role) -> frozenset:
    """Capabilities of a role; raises ValueError for anything outside UserRole."""
    return ROLE_CAPABILITIES[UserRole(role)]


def can(role, capability: Capability) -> bool:
    return capability in capabilities_for(role)
