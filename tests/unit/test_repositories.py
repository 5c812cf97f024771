"""
Unit tests for repository functions.
Tests user creation and lookup, and RSVP persistence.
"""
import uuid
import pytest

from wedding_api.core.errors import ConflictError
from wedding_api.db.models import RoleEnum, RsvpStatusEnum
from wedding_api.db.repositories import (
    create_rsvp,
    create_user,
    get_rsvp,
    get_user_by_email,
    list_rsvps,
    update_rsvp_status,
)


@pytest.mark.unit
@pytest.mark.asyncio
class TestUserRepository:
    """Test user repository functions."""

    async def test_create_user(self, db_session):
        user = await create_user(db_session, name="Ana", email="ana@example.com", password_hash="hashed")

        assert user.id is not None
        assert user.role == RoleEnum.guest
        assert user.created_at is not None
        assert user.updated_at is not None

    async def test_create_user_duplicate_email(self, db_session, test_user):
        with pytest.raises(ConflictError):
            await create_user(db_session, name="Copy", email=test_user.email, password_hash="hashed")

    async def test_get_user_by_email(self, db_session, test_user):
        user = await get_user_by_email(db_session, test_user.email)

        assert user is not None
        assert user.id == test_user.id

    async def test_get_user_by_email_not_found(self, db_session):
        assert await get_user_by_email(db_session, "nobody@example.com") is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestRsvpRepository:
    """Test RSVP repository functions."""

    async def test_create_rsvp_defaults_to_pending(self, db_session):
        rsvp = await create_rsvp(db_session, name="João Silva", guests=2)

        assert rsvp.id is not None
        assert rsvp.status == RsvpStatusEnum.PENDING
        assert rsvp.message is None
        assert rsvp.dietary is None

    async def test_get_rsvp(self, db_session, test_rsvp):
        rsvp = await get_rsvp(db_session, test_rsvp.id)

        assert rsvp is not None
        assert rsvp.name == test_rsvp.name

    async def test_get_rsvp_not_found(self, db_session):
        assert await get_rsvp(db_session, uuid.uuid4()) is None

    async def test_list_rsvps_newest_first(self, db_session, test_rsvps):
        rsvps = await list_rsvps(db_session)

        assert [r.id for r in rsvps] == [r.id for r in reversed(test_rsvps)]

    async def test_update_rsvp_status(self, db_session, test_rsvp):
        updated = await update_rsvp_status(db_session, test_rsvp.id, RsvpStatusEnum.APPROVED)

        assert updated is not None
        assert updated.status == RsvpStatusEnum.APPROVED
        assert updated.updated_at >= updated.created_at

    async def test_update_rsvp_status_missing(self, db_session):
        assert await update_rsvp_status(db_session, uuid.uuid4(), RsvpStatusEnum.REJECTED) is None
