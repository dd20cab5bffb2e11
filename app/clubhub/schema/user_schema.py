from pydantic import EmailStr, Field, field_validator
from typing import Optional

from clubhub.schema.base import CamelModel, reject_null


class SignupRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    registration_number: Optional[str] = None
    phone: Optional[str] = None
    stream: Optional[str] = None
    section: Optional[str] = None
    session: Optional[str] = None


class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    registration_number: Optional[str] = None
    phone: Optional[str] = None
    stream: Optional[str] = None
    section: Optional[str] = None
    session: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: str
    is_admin: bool = False
    registration_number: Optional[str] = None
    phone: Optional[str] = None
    stream: Optional[str] = None
    section: Optional[str] = None
    session: Optional[str] = None
