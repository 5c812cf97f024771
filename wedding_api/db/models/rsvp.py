from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, Index, CheckConstraint, Uuid
import uuid
from wedding_api.db.session import Base
from wedding_api.db.models.user import _utcnow
import enum


class RsvpStatusEnum(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Rsvp(Base):
    __tablename__ = "rsvps"
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    guests = Column(Integer, nullable=False)
    message = Column(Text, nullable=True)
    dietary = Column(Text, nullable=True)
    status = Column(Enum(RsvpStatusEnum), default=RsvpStatusEnum.PENDING, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    # Admin listing is newest first
    __table_args__ = (
        CheckConstraint("guests >= 1", name="ck_rsvp_guests_positive"),
        Index("idx_rsvp_created_at", "created_at"),
        Index("idx_rsvp_status", "status"),
    )
