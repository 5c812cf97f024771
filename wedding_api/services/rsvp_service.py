import uuid
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from wedding_api.core.errors import NotFoundError, ValidationError
from wedding_api.core.logging import logger
from wedding_api.db.models.rsvp import Rsvp
from wedding_api.db.repositories import create_rsvp as db_create_rsvp, get_rsvp as db_get_rsvp
from wedding_api.schemas import RsvpCreate

RSVP_NOT_FOUND = "RSVP not found"
# Upper bound of a 32-bit INTEGER column
MAX_GUESTS = 2_147_483_647


def parse_rsvp_id(rsvp_id: str) -> uuid.UUID:
    """Malformed ids cannot match a record, so they are reported as not found."""
    try:
        return uuid.UUID(str(rsvp_id))
    except ValueError:
        raise NotFoundError(RSVP_NOT_FOUND)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RSVPService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_rsvp(self, payload: RsvpCreate) -> Rsvp:
        name = (payload.name or "").strip()
        if not name or not payload.guests:
            raise ValidationError("Name and number of guests are required")
        if payload.guests < 1 or payload.guests > MAX_GUESTS:
            raise ValidationError(f"Number of guests must be between 1 and {MAX_GUESTS}")

        rsvp = await db_create_rsvp(
            self.session,
            name=name,
            guests=int(payload.guests),
            message=_clean(payload.message),
            dietary=_clean(payload.dietary),
        )
        logger.info(f"RSVP {rsvp.id} created for {rsvp.guests} guest(s)")
        return rsvp

    async def get_rsvp(self, rsvp_id: str) -> Rsvp:
        rsvp = await db_get_rsvp(self.session, parse_rsvp_id(rsvp_id))
        if rsvp is None:
            raise NotFoundError(RSVP_NOT_FOUND)
        return rsvp
