"""Admin operations: shared-code login and RSVP review."""
import secrets
from typing import Any, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from wedding_api.core.config import Settings
from wedding_api.core.errors import NotFoundError, UnauthorizedError, ValidationError
from wedding_api.core.logging import logger
from wedding_api.core.security import TokenService
from wedding_api.db.models.rsvp import Rsvp, RsvpStatusEnum
from wedding_api.db.repositories import list_rsvps as db_list_rsvps, update_rsvp_status as db_update_rsvp_status
from wedding_api.services.rsvp_service import RSVP_NOT_FOUND, parse_rsvp_id

ADMIN_ROLE = "admin"
ALLOWED_STATUSES = [s.value for s in RsvpStatusEnum]


class AdminService:
    """
    Service layer for the couple's admin panel.

    Login compares against one server-wide code; there is no per-admin
    identity in the issued token.
    """

    def __init__(self, session: AsyncSession, tokens: TokenService, settings: Settings):
        self.session = session
        self.tokens = tokens
        self.admin_code = settings.ADMIN_CODE

    def login(self, code: Optional[str]) -> dict:
        """
        Exchange the admin code for a token.

        Raises:
            UnauthorizedError: If the code is missing or wrong
        """
        if not code or not secrets.compare_digest(code.encode(), self.admin_code.encode()):
            logger.warning("Admin login rejected: invalid code")
            raise UnauthorizedError("Invalid code")
        return {"token": self.tokens.issue({"role": ADMIN_ROLE})}

    async def list_rsvps(self) -> List[Rsvp]:
        return await db_list_rsvps(self.session)

    async def update_status(self, rsvp_id: str, status: Any) -> Rsvp:
        """
        Set the status of an RSVP.

        Raises:
            ValidationError: If ``status`` is not one of ALLOWED_STATUSES
            NotFoundError: If no RSVP has this id
        """
        if not isinstance(status, str) or status not in ALLOWED_STATUSES:
            raise ValidationError(f"Invalid status. Use one of: {', '.join(ALLOWED_STATUSES)}")

        updated = await db_update_rsvp_status(self.session, parse_rsvp_id(rsvp_id), RsvpStatusEnum(status))
        if updated is None:
            raise NotFoundError(RSVP_NOT_FOUND)
        logger.info(f"RSVP {updated.id} status set to {status}")
        return updated
