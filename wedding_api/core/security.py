"""
Password hashing and the signed token service.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from wedding_api.core.config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a password against a hash."""
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class TokenError(ValueError):
    """Raised when a token cannot be validated."""


class InvalidTokenError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens carry a ``role`` claim and, for user accounts, a ``sub`` claim
    holding the user id. Validity depends only on signature and expiry.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.expires_delta = timedelta(days=settings.TOKEN_EXPIRE_DAYS)

    def issue(self, claims: Dict, expires_delta: Optional[timedelta] = None) -> str:
        """
        Sign a claim set.

        Args:
            claims: Claims to encode (``role`` and optionally ``sub``)
            expires_delta: Optional override of the default lifetime

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        to_encode = claims.copy()
        to_encode.update({"iat": now, "exp": now + (expires_delta or self.expires_delta)})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict:
        """
        Decode and validate a token.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or format is invalid
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError("Token has expired")
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
