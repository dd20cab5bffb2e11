from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from clubhub.database import Base

class Submission(Base):
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    registration_number = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    whatsapp = Column(String, nullable=True)
    course = Column(String, nullable=True)
    section = Column(String, nullable=True)
    year = Column(String, nullable=True)
    batch = Column(String, nullable=True)
    github = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending, approved, rejected
    submitted_at = Column(DateTime, default=datetime.utcnow)
