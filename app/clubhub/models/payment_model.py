from sqlalchemy import Column, Integer, String, Float, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from clubhub.database import Base

class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String, nullable=False, unique=True, index=True)
    payment_id = Column(String, nullable=True)

    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    registration_id = Column(Integer, ForeignKey("event_registrations.id", ondelete="SET NULL"), nullable=True)

    # Denormalized for listing
    user_name = Column(String, nullable=False)
    user_email = Column(String, nullable=True)
    registration_no = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)

    amount = Column(Float, nullable=False)
    currency = Column(String, nullable=False, default="INR")
    status = Column(String, nullable=False, default="pending", index=True)  # pending, success, failed

    # Registration form submitted with the order, replayed on success
    registration_data = Column(JSON, default=dict)

    created_at = Column(DateTime, default=datetime.utcnow)
    paid_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    event = relationship("Event", back_populates="payments")
    user = relationship("User", back_populates="payments")
    registration = relationship("EventRegistration", back_populates="payment")
