from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Murmur API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = """
    Small social backend for short text posts.

    ## Features
    * Email/password signup and login with cookie sessions
    * Post creation and retrieval
    * Likes and like status
    * Public user profiles
    """
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_TAGS: list[dict] = [
        {
            "name": "auth",
            "description": "Signup, login, logout and session lookup"
        },
        {
            "name": "pages",
            "description": "Server-rendered HTML pages"
        },
        {
            "name": "users",
            "description": "Public profiles and profile updates"
        },
        {
            "name": "posts",
            "description": "Post creation and retrieval"
        },
        {
            "name": "social",
            "description": "Liking and unliking posts"
        },
    ]

    # Server
    HOST: str = "localhost"
    PORT: int = 2468

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:2468", "http://localhost"]

    # Database
    DB_USER: str
    DB_PASS: str
    DB_NAME: str
    DB_HOST: str
    DB_PORT: int = 5432
    DB_ECHO: bool = False
    DB_CONNECT_TIMEOUT: int = 10  # seconds

    @property
    def DATABASE_URL(self) -> str:
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Sessions
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_COOKIE_MAX_AGE: int = 3600  # 1 hour
    COOKIE_DOMAIN: str | None = None
    COOKIE_SECURE: bool = False
    BCRYPT_ROUNDS: int = 12

    # Templates and static files
    TEMPLATES_DIR: str = str(ROOT_DIR / "templates")
    STATIC_DIR: str = str(ROOT_DIR / "static")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    SEED_DEMO_DATA: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings(_env_file=ROOT_DIR / ".env")
