import logging

from passlib.context import CryptContext

from core.config import get_settings
from core.errors import HashingError

settings = get_settings()
logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt (salted, cost-parameterized)"""
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise HashingError("Could not hash password") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash.

    A mismatch returns False. A hash that passlib cannot identify or parse
    raises HashingError.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed: {e}")
        raise HashingError("Stored password hash is malformed") from e
