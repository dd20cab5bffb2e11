from pydantic import Field
from typing import Optional, Literal
from datetime import datetime

from clubhub.schema.base import CamelModel


class PaymentStatusUpdate(CamelModel):
    status: Literal["success", "failed"]
    payment_id: Optional[str] = None


class PaymentOut(CamelModel):
    id: int
    order_id: str
    payment_id: Optional[str] = None
    event_id: int
    user_id: Optional[int] = None
    registration_id: Optional[int] = None
    user_name: str
    user_email: Optional[str] = None
    registration_no: Optional[str] = None
    phone_number: Optional[str] = None
    amount: float = Field(0)
    currency: str = "INR"
    status: str
    created_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
