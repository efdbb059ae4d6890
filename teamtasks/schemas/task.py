"""Schemas for tasks and their status history"""
from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from teamtasks.models.task import TaskPriority, TaskStatus
from teamtasks.schemas.base import ResponseModel
from teamtasks.schemas.team import TeamResponse


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=6, max_length=255)
    description: str = Field(..., min_length=6)
    assigned_to: UUID
    team_id: UUID
    priority: TaskPriority = TaskPriority.LOW


class TaskUpdate(BaseModel):
    """Full edit of a task by its assignee."""

    title: str = Field(..., max_length=255)
    description: str
    status: TaskStatus
    priority: TaskPriority


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskPriorityUpdate(BaseModel):
    priority: TaskPriority


class TaskHistoryResponse(ResponseModel):
    id: UUID
    task_id: UUID
    old_status: TaskStatus
    new_status: TaskStatus
    changed_by: UUID
    changed_at: datetime


class TaskResponse(ResponseModel):
    id: UUID
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    assigned_to: UUID
    team_id: UUID
    created_at: datetime
    updated_at: datetime


class TaskDetailResponse(TaskResponse):
    task_history: List[TaskHistoryResponse] = []
    team: TeamResponse
