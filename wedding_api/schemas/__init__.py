from pydantic import BaseModel, EmailStr
from typing import Any, Optional
from uuid import UUID
from datetime import datetime
from wedding_api.db.models.rsvp import RsvpStatusEnum


class ErrorOut(BaseModel):
    message: str


# Request fields are optional so that missing values reach the services,
# which report them with a readable message.
class RsvpCreate(BaseModel):
    name: Optional[str] = None
    guests: Optional[int] = None
    message: Optional[str] = None
    dietary: Optional[str] = None


class RsvpStatusUpdate(BaseModel):
    # Any value is accepted here; the admin service lists the valid statuses
    status: Optional[Any] = None


class RsvpOut(BaseModel):
    id: UUID
    name: str
    guests: int
    message: Optional[str]
    dietary: Optional[str]
    status: RsvpStatusEnum
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AdminLoginRequest(BaseModel):
    code: Optional[str] = None


class Token(BaseModel):
    token: str


class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for user login request."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    id: UUID
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    user: UserOut
    token: str
