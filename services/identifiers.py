import secrets
import string

from core.errors import GenerationError

ALPHABET = string.ascii_letters + string.digits

USER_ID_LENGTH = 8
POST_ID_LENGTH = 8
LIKE_ID_LENGTH = 8
SESSION_ID_LENGTH = 16


def generate_id(length: int) -> str:
    """Random alphanumeric identifier drawn from the OS CSPRNG"""
    if length < 0:
        raise ValueError("length must not be negative")
    try:
        return ''.join(secrets.choice(ALPHABET) for _ in range(length))
    except (NotImplementedError, OSError) as e:
        raise GenerationError("Secure random source unavailable") from e
