from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from clubhub.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")  # user, admin
    is_admin = Column(Boolean, nullable=False, default=False)

    registration_number = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    stream = Column(String, nullable=True)
    section = Column(String, nullable=True)
    session = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    registrations = relationship("EventRegistration", back_populates="user")
    payments = relationship("Payment", back_populates="user")

    @property
    def admin(self) -> bool:
        return bool(self.is_admin) or self.role == "admin"
