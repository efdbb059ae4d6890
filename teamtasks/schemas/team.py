"""Schemas for teams and team membership"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from teamtasks.schemas.base import ResponseModel
from teamtasks.schemas.user import UserResponse


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=6)


class TeamResponse(ResponseModel):
    id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


class TeamMemberCreate(BaseModel):
    user_id: UUID = Field(..., alias="userId")

    class Config:
        populate_by_name = True


class TeamMemberResponse(ResponseModel):
    id: UUID
    team_id: UUID
    user_id: UUID
    created_at: datetime
    user: UserResponse
