"""User registration and login."""
from __future__ import annotations
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from screenlist.errors import AuthError, ConflictError
from screenlist.models.user import User
from screenlist.services.identity import hash_password, verify_password

logger = logging.getLogger(__name__)


async def register(db: AsyncSession, username: str, email: str, password: str) -> User:
    result = await db.execute(
        select(User.id).where(or_(User.email == email, User.username == username))
    )
    if result.first() is not None:
        raise ConflictError("User with that email or username already exists")

    user = User(username=username, email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same name/email.
        await db.rollback()
        raise ConflictError("User with that email or username already exists") from e
    await db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        raise AuthError("Invalid email or password")
    return user
