from sqlalchemy import Column, Integer, String, Float, Text, DateTime, Boolean, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from clubhub.database import Base

EVENT_STATUSES = ("upcoming", "completed", "cancelled")
EVENT_TYPES = (
    "workshop", "meeting", "hackathon", "bootcamp",
    "webinar", "tech-training", "coding-class", "other",
)


def default_team_settings():
    return {"enabled": False, "minTeamSize": 1, "maxTeamSize": 4}


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    short_description = Column(String(150), nullable=True)
    date = Column(DateTime, nullable=True)
    time = Column(String, nullable=True)
    location = Column(String, nullable=True)
    image = Column(String, nullable=True)
    tags = Column(JSON, default=list)
    status = Column(String, nullable=False, default="upcoming")  # upcoming, completed, cancelled
    max_attendees = Column(Integer, nullable=True)
    registration_count = Column(Integer, nullable=False, default=0)

    event_type = Column(String, nullable=False, default="other")
    team_settings = Column(JSON, default=default_team_settings)

    is_paid = Column(Boolean, nullable=False, default=False)
    price = Column(Float, nullable=False, default=0)

    gallery = Column(JSON, default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    registrations = relationship("EventRegistration", back_populates="event", cascade="all, delete-orphan")
    payments = relationship("Payment", back_populates="event", cascade="all, delete-orphan")

    @property
    def requires_payment(self) -> bool:
        return bool(self.is_paid) and (self.price or 0) > 0

    @property
    def team_mode(self) -> bool:
        settings = self.team_settings or {}
        return self.event_type == "hackathon" and bool(settings.get("enabled"))

    def summary(self) -> dict:
        return {"id": self.id, "title": self.title, "slug": self.slug, "date": self.date}
