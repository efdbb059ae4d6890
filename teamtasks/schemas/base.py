"""Shared configuration for response schemas"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    """Read from ORM rows, serialized with camelCase keys."""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
