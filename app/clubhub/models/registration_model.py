from sqlalchemy import Column, Integer, String, DateTime, Boolean, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from clubhub.database import Base

class EventRegistration(Base):
    __tablename__ = "event_registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "registration_no", name="uq_registration_event_regno"),
        UniqueConstraint("event_id", "user_id", name="uq_registration_event_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    name = Column(String, nullable=False)
    registration_no = Column(String, nullable=False)  # trimmed + uppercased
    phone_number = Column(String, nullable=False)
    whatsapp_number = Column(String, nullable=True)
    course = Column(String, nullable=False)
    section = Column(String, nullable=False)
    year = Column(String, nullable=False)
    department = Column(String, nullable=False)

    is_team_registration = Column(Boolean, nullable=False, default=False)
    team_name = Column(String, nullable=True)
    team_members = Column(JSON, default=list)

    payment_status = Column(String, nullable=False, default="free")  # free, pending, completed
    registered_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    event = relationship("Event", back_populates="registrations")
    user = relationship("User", back_populates="registrations")
    payment = relationship("Payment", back_populates="registration", uselist=False)
