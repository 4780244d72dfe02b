"""
Lookup Schemas - Categories and tags
"""

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime


class LookupCreate(BaseModel):
    name: str
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Name cannot be empty")
        if len(v.strip()) > 50:
            raise ValueError("Name cannot exceed 50 characters")
        return v.strip()


class LookupResponse(BaseModel):
    id: int
    name: str
    color: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(LookupCreate):
    pass


class CategoryResponse(LookupResponse):
    pass


class TagCreate(LookupCreate):
    pass


class TagResponse(LookupResponse):
    pass
