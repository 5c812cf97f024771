"""Authentication service for guest accounts."""
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool
from wedding_api.schemas import UserCreate, LoginRequest, UserOut
from wedding_api.db.models.user import User
from wedding_api.db.repositories import create_user as db_create_user, get_user_by_email as db_get_user_by_email
from wedding_api.core.errors import ConflictError, UnauthorizedError, ValidationError
from wedding_api.core.logging import logger
from wedding_api.core.security import TokenService, hash_password, verify_password

INVALID_CREDENTIALS = "Invalid credentials"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """
    Service layer for authentication operations.

    Handles guest registration and login. Both return the user's public
    projection together with a signed token.
    """

    def __init__(self, session: AsyncSession, tokens: TokenService):
        """
        Initialize AuthService.

        Args:
            session: SQLAlchemy async session
            tokens: Token service used to sign user tokens
        """
        self.session = session
        self.tokens = tokens

    def _build_response(self, user: User) -> dict:
        token = self.tokens.issue({"sub": str(user.id), "role": user.role.value})
        public = UserOut(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        return {"user": public, "token": token}

    async def register(self, payload: UserCreate) -> dict:
        """
        Register a new user.

        Args:
            payload: Registration data containing name, email and password

        Returns:
            Dictionary with the public user and a token

        Raises:
            ValidationError: If a field is missing
            ConflictError: If the email already exists
        """
        name = (payload.name or "").strip()
        if not name or not payload.email or not payload.password:
            raise ValidationError("Name, email and password are required")

        email = normalize_email(payload.email)
        existing = await db_get_user_by_email(self.session, email)
        if existing:
            raise ConflictError("A user with this email already exists")

        password_hash = await run_in_threadpool(hash_password, payload.password)
        user = await db_create_user(self.session, name=name, email=email, password_hash=password_hash)
        logger.info(f"Registered user {user.id}")
        return self._build_response(user)

    async def login(self, form_data: LoginRequest) -> dict:
        """
        Authenticate a user.

        Unknown emails and wrong passwords produce the same error.

        Raises:
            ValidationError: If email or password is missing
            UnauthorizedError: If credentials are invalid
        """
        if not form_data.email or not form_data.password:
            raise ValidationError("Email and password are required")

        user = await db_get_user_by_email(self.session, normalize_email(form_data.email))
        if not user or not await run_in_threadpool(verify_password, form_data.password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return self._build_response(user)
