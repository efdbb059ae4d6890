"""Role based access to route capabilities.

Every guarded route names one ``Action``; ``PERMISSIONS`` is the single place
that says which roles may perform it and ``authorize`` the single place that
checks it.
"""
import enum
from typing import Dict, FrozenSet
from uuid import UUID

from pydantic import BaseModel

from teamtasks.errors import ForbiddenError
from teamtasks.models.user import UserRole

FORBIDDEN_MESSAGE = "User does not have permission"


class Action(str, enum.Enum):
    TASK_UPDATE_STATUS = "task:update_status"
    TASK_UPDATE_PRIORITY = "task:update_priority"
    TASK_UPDATE_OWN = "task:update_own"
    TEAM_LIST = "team:list"
    TEAM_CREATE = "team:create"
    TEAM_DELETE = "team:delete"
    TEAM_MEMBERS_LIST = "team:members:list"
    TEAM_MEMBERS_MANAGE = "team:members:manage"
    USER_READ_SELF = "user:read_self"


_ADMIN_ONLY = frozenset({UserRole.ADMIN})
_ANY_ROLE = frozenset({UserRole.ADMIN, UserRole.MEMBER})

PERMISSIONS: Dict[Action, FrozenSet[UserRole]] = {
    Action.TASK_UPDATE_STATUS: _ADMIN_ONLY,
    Action.TASK_UPDATE_PRIORITY: _ADMIN_ONLY,
    Action.TASK_UPDATE_OWN: _ANY_ROLE,
    Action.TEAM_LIST: _ANY_ROLE,
    Action.TEAM_CREATE: _ADMIN_ONLY,
    Action.TEAM_DELETE: _ADMIN_ONLY,
    Action.TEAM_MEMBERS_LIST: _ANY_ROLE,
    Action.TEAM_MEMBERS_MANAGE: _ADMIN_ONLY,
    Action.USER_READ_SELF: _ANY_ROLE,
}


class Principal(BaseModel):
    """The authenticated caller, as decoded from a valid token."""

    id: UUID
    role: UserRole


def is_allowed(role: UserRole, action: Action) -> bool:
    return role in PERMISSIONS.get(action, frozenset())


def authorize(principal: Principal, action: Action) -> Principal:
    if not is_allowed(principal.role, action):
        raise ForbiddenError(FORBIDDEN_MESSAGE)
    return principal
