from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from clubhub.schema.base import CamelModel, reject_null


class GalleryCreate(CamelModel):
    title: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None


class GalleryUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None

    @field_validator("title", "image_url", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class GalleryOut(GalleryCreate):
    id: int
    created_at: Optional[datetime] = None
