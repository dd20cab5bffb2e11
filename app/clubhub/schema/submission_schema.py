from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from clubhub.schema.base import CamelModel, reject_null
from clubhub.schema.testimonial_schema import ReviewStatus


class SubmissionCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    registration_number: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    course: Optional[str] = None
    section: Optional[str] = None
    year: Optional[str] = None
    batch: Optional[str] = None
    github: Optional[str] = None


class SubmissionUpdate(CamelModel):
    status: Optional[ReviewStatus] = None
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    course: Optional[str] = None
    section: Optional[str] = None
    year: Optional[str] = None
    batch: Optional[str] = None
    github: Optional[str] = None

    @field_validator("status", "name", "email", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class SubmissionOut(SubmissionCreate):
    id: int
    status: str
    submitted_at: Optional[datetime] = None
