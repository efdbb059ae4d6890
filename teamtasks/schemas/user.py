"""Schemas for users and sessions"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from teamtasks.models.user import UserRole
from teamtasks.schemas.base import ResponseModel


class UserCreate(BaseModel):
    name: str = Field(..., min_length=6, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Optional[UserRole] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(ResponseModel):
    """Public projection of a user; the password hash never leaves the service."""

    id: UUID
    name: str
    email: EmailStr
    role: UserRole
    created_at: datetime
    updated_at: datetime


class SessionResponse(BaseModel):
    token: str
    user: UserResponse
