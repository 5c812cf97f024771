"""
Pytest configuration and fixtures for testing.
"""
import os

# Settings are read once at import time, so the environment is prepared first.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test_wedding.db")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_CODE"] = "test-admin-code"
os.environ["ALLOWED_ORIGINS"] = "http://localhost:5173"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
import pytest_asyncio
from typing import AsyncGenerator, List
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from wedding_api.main import app
from wedding_api.db.session import Base, get_session
from wedding_api.core.config import get_settings
from wedding_api.core.security import TokenService, hash_password
from wedding_api.db.models.user import User, RoleEnum
from wedding_api.db.models.rsvp import Rsvp, RsvpStatusEnum

ADMIN_CODE = "test-admin-code"
TEST_PASSWORD = "Secret123"

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=NullPool,  # Disable connection pooling for tests
    echo=False,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database session for each test.
    Tables are recreated around every test for isolation.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing API endpoints.
    Overrides the database session dependency.
    """
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(get_settings())


@pytest.fixture
def admin_token(token_service: TokenService) -> str:
    """A token equivalent to the one issued by the admin code login."""
    return token_service.issue({"role": "admin"})


@pytest.fixture
def admin_headers(admin_token: str) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user with 'guest' role."""
    user = User(
        name="Test Guest",
        email="guest@example.com",
        password_hash=hash_password(TEST_PASSWORD),
        role=RoleEnum.guest,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def user_token(test_user: User, token_service: TokenService) -> str:
    return token_service.issue({"sub": str(test_user.id), "role": test_user.role.value})


@pytest_asyncio.fixture
async def test_rsvp(db_session: AsyncSession) -> Rsvp:
    """Create a pending test RSVP."""
    rsvp = Rsvp(name="Maria Costa", guests=2, message="Can't wait!", dietary="Vegetarian")
    db_session.add(rsvp)
    await db_session.commit()
    await db_session.refresh(rsvp)
    return rsvp


@pytest_asyncio.fixture
async def test_rsvps(db_session: AsyncSession) -> List[Rsvp]:
    """Create several RSVPs one after another, oldest first."""
    rsvps = []
    for i in range(3):
        rsvp = Rsvp(name=f"Guest {i + 1}", guests=i + 1, status=RsvpStatusEnum.PENDING)
        db_session.add(rsvp)
        await db_session.commit()
        await db_session.refresh(rsvp)
        rsvps.append(rsvp)
    return rsvps


@pytest.fixture(autouse=True)
def mock_password_hashing(request, monkeypatch):
    """
    Mock bcrypt password hashing to keep tests fast.
    This fixture is autouse; tests marked 'real_hashing' use bcrypt itself.
    """
    if request.node.get_closest_marker("real_hashing"):
        return

    class MockPasswordContext:
        """Mock password context that doesn't require bcrypt."""
        def hash(self, password: str) -> str:
            return f"$2b$12$mockedhash{password}"

        def verify(self, plain: str, hashed: str) -> bool:
            return hashed == f"$2b$12$mockedhash{plain}"

    from wedding_api.core import security
    monkeypatch.setattr(security, "pwd_context", MockPasswordContext())
