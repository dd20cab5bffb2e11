from pydantic import Field
from typing import Optional, List
from datetime import datetime

from clubhub.schema.base import CamelModel


class RegistrationOut(CamelModel):
    id: int
    event_id: int
    user_id: Optional[int] = None
    name: str
    registration_no: str
    phone_number: str
    whatsapp_number: Optional[str] = None
    course: str
    section: str
    year: str
    department: str
    is_team_registration: bool = False
    team_name: Optional[str] = None
    team_members: List[dict] = Field(default_factory=list)
    payment_status: str
    registered_at: Optional[datetime] = None
