"""Admin routes: code login, RSVP listing and status review."""
from typing import Dict, List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from wedding_api.auth import get_token_service, require_admin
from wedding_api.core.config import Settings, get_app_settings
from wedding_api.core.rate_limit import limiter, login_limit
from wedding_api.core.security import TokenService
from wedding_api.db.session import get_session
from wedding_api.schemas import AdminLoginRequest, ErrorOut, RsvpOut, RsvpStatusUpdate, Token
from wedding_api.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"])


def get_admin_service(
    session: AsyncSession = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_app_settings),
) -> AdminService:
    return AdminService(session, tokens, settings)


@router.post("/login", response_model=Token, responses={401: {"model": ErrorOut}})
@limiter.limit(login_limit)
async def admin_login(
    request: Request,
    payload: AdminLoginRequest,
    admin_service: AdminService = Depends(get_admin_service)
):
    """
    Log in with the shared admin code.

    Rate limit: LOGIN_RATE_LIMIT per client address
    """
    return admin_service.login(payload.code)


@router.get("/rsvps", response_model=List[RsvpOut], responses={401: {"model": ErrorOut}})
async def list_rsvps(
    admin: Dict = Depends(require_admin),
    admin_service: AdminService = Depends(get_admin_service)
):
    """List every RSVP, newest first."""
    return await admin_service.list_rsvps()


@router.patch(
    "/rsvps/{rsvp_id}/status",
    response_model=RsvpOut,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
async def update_rsvp_status(
    rsvp_id: str,
    payload: RsvpStatusUpdate,
    admin: Dict = Depends(require_admin),
    admin_service: AdminService = Depends(get_admin_service)
):
    return await admin_service.update_status(rsvp_id, payload.status)
