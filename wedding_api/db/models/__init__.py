"""Database models package."""
from wedding_api.db.models.user import User, RoleEnum
from wedding_api.db.models.rsvp import Rsvp, RsvpStatusEnum

__all__ = ["User", "RoleEnum", "Rsvp", "RsvpStatusEnum"]
