"""
Pydantic schemas for request/response validation
"""
from teamtasks.schemas.user import UserCreate, UserLogin, UserResponse, SessionResponse
from teamtasks.schemas.team import TeamCreate, TeamResponse, TeamMemberCreate, TeamMemberResponse
from teamtasks.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskStatusUpdate,
    TaskPriorityUpdate,
    TaskHistoryResponse,
    TaskResponse,
    TaskDetailResponse,
)

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "SessionResponse",
    "TeamCreate",
    "TeamResponse",
    "TeamMemberCreate",
    "TeamMemberResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskStatusUpdate",
    "TaskPriorityUpdate",
    "TaskHistoryResponse",
    "TaskResponse",
    "TaskDetailResponse",
]
