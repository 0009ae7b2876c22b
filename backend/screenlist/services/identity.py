"""Password hashing and bearer-token issue/verification."""
from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from screenlist.config import get_settings
from screenlist.errors import AuthError

logger = logging.getLogger(__name__)
settings = get_settings()

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str | None) -> int:
    """Return the user id carried by ``token``.

    Raises AuthError when the token is absent, malformed, badly signed or
    expired. All four cases surface with the same message.
    """
    if not token:
        logger.debug("Rejected request without credentials")
        raise AuthError()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise AuthError() from e

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        logger.debug("Rejected token without a usable subject")
        raise AuthError() from e
