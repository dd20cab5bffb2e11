from pydantic import Field, field_validator
from typing import Optional, Literal
from datetime import datetime

from clubhub.schema.base import CamelModel, reject_null

ReviewStatus = Literal["pending", "approved", "rejected"]


class TestimonialSubmit(CamelModel):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    role: Optional[str] = None
    message: str = Field(..., min_length=1)
    rating: int = Field(5, ge=1, le=5)


class TestimonialUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    role: Optional[str] = None
    message: Optional[str] = Field(None, min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)
    status: Optional[ReviewStatus] = None

    @field_validator("name", "message", "rating", "status", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class TestimonialOut(TestimonialSubmit):
    id: int
    status: str
    created_at: Optional[datetime] = None
