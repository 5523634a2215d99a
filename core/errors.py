"""Error types raised by the store, the auth helpers and the routers."""


class MurmurError(Exception):
    """Base exception for all Murmur errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(MurmurError):
    """A required field is missing or empty."""


class AuthenticationError(MurmurError):
    """The request carries no session cookie or the session is unknown."""


class HashingError(MurmurError):
    """Password hashing or verification failed inside the hashing backend."""


class GenerationError(MurmurError):
    """The secure random source needed for identifiers is unavailable."""


class StartupError(MurmurError):
    """The application cannot start."""


class StoreError(MurmurError):
    """Base class for data access failures."""


class NotFoundError(StoreError):
    """No row matches the lookup."""


class DuplicateError(StoreError):
    """A unique constraint was violated."""


class DuplicateEmailError(DuplicateError):
    """A user with this email already exists."""


class PersistenceError(StoreError):
    """Any other database failure."""


class SchemaError(StoreError):
    """The schema could not be created."""
