from pydantic import Field, field_validator
from typing import Optional, List, Literal
from datetime import datetime

from clubhub.schema.base import CamelModel, reject_null

EventStatus = Literal["upcoming", "completed", "cancelled"]
EventType = Literal[
    "workshop", "meeting", "hackathon", "bootcamp",
    "webinar", "tech-training", "coding-class", "other",
]


class TeamSettings(CamelModel):
    enabled: bool = False
    min_team_size: int = Field(1, ge=1)
    max_team_size: int = Field(4, ge=1)


class GalleryImage(CamelModel):
    url: str
    caption: Optional[str] = None


class EventCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, max_length=150)
    date: Optional[datetime] = None
    time: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: EventStatus = "upcoming"
    max_attendees: Optional[int] = Field(None, ge=0)
    event_type: EventType = "other"
    team_settings: TeamSettings = Field(default_factory=TeamSettings)
    is_paid: bool = False
    price: float = Field(0, ge=0)
    gallery: List[GalleryImage] = Field(default_factory=list)


class EventUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, max_length=150)
    date: Optional[datetime] = None
    time: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[EventStatus] = None
    max_attendees: Optional[int] = Field(None, ge=0)
    event_type: Optional[EventType] = None
    team_settings: Optional[TeamSettings] = None
    is_paid: Optional[bool] = None
    price: Optional[float] = Field(None, ge=0)
    gallery: Optional[List[GalleryImage]] = None

    @field_validator("title", "status", "event_type", "is_paid", "price",
                     "tags", "team_settings", "gallery", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class EventOut(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    date: Optional[datetime] = None
    time: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: str
    max_attendees: Optional[int] = None
    registration_count: int = 0
    event_type: str
    team_settings: Optional[dict] = None
    is_paid: bool = False
    price: float = 0
    gallery: List[dict] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
