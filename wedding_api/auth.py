from typing import Dict, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from wedding_api.core.config import Settings, get_app_settings
from wedding_api.core.errors import UnauthorizedError
from wedding_api.core.logging import logger
from wedding_api.core.security import TokenError, TokenService

# auto_error=False so a missing header is reported as 401 rather than 403
security = HTTPBearer(auto_error=False)


def get_token_service(settings: Settings = Depends(get_app_settings)) -> TokenService:
    return TokenService(settings)


async def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> Dict:
    """
    Allow the request only with a valid admin bearer token.

    Args:
        request: Incoming request; the decoded claims are stored on
            ``request.state.admin``
        credentials: HTTP Bearer credentials, None if absent or malformed
        tokens: Token service (injected)

    Returns:
        The decoded claim set

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired or not an
            admin token
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Admin token not provided")

    try:
        payload = tokens.verify(credentials.credentials)
    except TokenError as e:
        logger.warning(f"Rejected admin token: {e}")
        raise UnauthorizedError("Invalid or expired token")

    if payload.get("role") != "admin":
        logger.warning("Rejected token without admin role")
        raise UnauthorizedError("Invalid token for admin")

    request.state.admin = payload
    return payload
