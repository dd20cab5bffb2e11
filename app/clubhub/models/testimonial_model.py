from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from clubhub.database import Base

class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    role = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)
    status = Column(String, nullable=False, default="pending")  # pending, approved, rejected
    created_at = Column(DateTime, default=datetime.utcnow)
