"""
Repository layer for database operations.

Provides async functions for the User and Rsvp tables. Functions take the
session as their first argument and commit their own writes.
"""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from wedding_api.core.errors import ConflictError
from wedding_api.db.models.user import User, RoleEnum
from wedding_api.db.models.rsvp import Rsvp, RsvpStatusEnum
from typing import Optional, List
import uuid


async def create_user(
    db: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
    role: RoleEnum = RoleEnum.guest,
) -> User:
    """
    Create a new user.

    Args:
        db: Database session
        name: Display name
        email: Normalized email address
        password_hash: Already hashed password
        role: Account role

    Returns:
        Created User object

    Raises:
        ConflictError: If the email is already taken
    """
    user = User(name=name, email=email, password_hash=password_hash, role=role)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("A user with this email already exists")
    await db.refresh(user)
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Retrieve user by email address.

    Args:
        db: Database session
        email: Normalized email address

    Returns:
        User object if found, None otherwise
    """
    q = select(User).where(User.email == email)
    res = await db.execute(q)
    return res.scalars().first()


async def create_rsvp(
    db: AsyncSession,
    name: str,
    guests: int,
    message: Optional[str] = None,
    dietary: Optional[str] = None,
) -> Rsvp:
    r = Rsvp(name=name, guests=guests, message=message, dietary=dietary, status=RsvpStatusEnum.PENDING)
    db.add(r)
    await db.commit()
    await db.refresh(r)
    return r


async def get_rsvp(db: AsyncSession, rsvp_id: uuid.UUID) -> Optional[Rsvp]:
    q = select(Rsvp).where(Rsvp.id == rsvp_id)
    res = await db.execute(q)
    return res.scalars().first()


async def list_rsvps(db: AsyncSession) -> List[Rsvp]:
    """List every RSVP, newest first."""
    q = select(Rsvp).order_by(Rsvp.created_at.desc())
    res = await db.execute(q)
    return list(res.scalars().all())


async def update_rsvp_status(db: AsyncSession, rsvp_id: uuid.UUID, status: RsvpStatusEnum) -> Optional[Rsvp]:
    """
    Overwrite the status of an RSVP.

    Returns:
        The updated Rsvp, or None if no record has this id
    """
    r = await get_rsvp(db, rsvp_id)
    if r is None:
        return None
    r.status = status
    await db.commit()
    await db.refresh(r)
    return r
