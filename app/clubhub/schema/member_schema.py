from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from clubhub.schema.base import CamelModel, reject_null


class MemberCreate(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    image: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    order: int = 0


class MemberUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    order: Optional[int] = None

    @field_validator("name", "role", "order", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class MemberOut(MemberCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
