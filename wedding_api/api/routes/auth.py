"""Authentication routes for guest registration and login."""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from wedding_api.auth import get_token_service
from wedding_api.core.rate_limit import limiter, login_limit, register_limit
from wedding_api.core.security import TokenService
from wedding_api.db.session import get_session
from wedding_api.schemas import AuthResponse, ErrorOut, LoginRequest, UserCreate
from wedding_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(
    session: AsyncSession = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    """
    Dependency injection for AuthService.

    Args:
        session: Database session
        tokens: Token service

    Returns:
        AuthService instance
    """
    return AuthService(session, tokens)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
@limiter.limit(register_limit)
async def register(
    request: Request,
    payload: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new guest account.

    Rate limit: REGISTER_RATE_LIMIT per client address

    Returns:
        The created user and a token bound to it

    Raises:
        ValidationError: If a field is missing
        ConflictError: If the email is already registered
    """
    return await auth_service.register(payload)


@router.post("/login", response_model=AuthResponse, responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}})
@limiter.limit(login_limit)
async def login(
    request: Request,
    form_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login endpoint returning the user and a token.

    Rate limit: LOGIN_RATE_LIMIT per client address
    """
    return await auth_service.login(form_data)
