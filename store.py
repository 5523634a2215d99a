from contextlib import contextmanager
from typing import Iterator, List
import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from auth.security import get_password_hash
from core.config import Settings
from core.errors import (
    DuplicateEmailError, DuplicateError, NotFoundError, PersistenceError,
    SchemaError, StoreError
)
from models import AuthSession, FullPost, Like, Post, PostPublic, PrivateUser, User, UserPublic
from services.identifiers import (
    LIKE_ID_LENGTH, POST_ID_LENGTH, SESSION_ID_LENGTH, USER_ID_LENGTH, generate_id
)

logger = logging.getLogger(__name__)


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the failed statement hit a primary key or unique constraint"""
    pgcode = getattr(error.orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == "23505"
    return "UNIQUE constraint failed" in str(error.orig)


class Store:
    """Owns the schema and all reads and writes for users, posts, likes and sessions.

    Every method opens its own session and runs one or two statements. Nothing
    is cached between calls. SQLAlchemy errors never leave this class: they are
    logged and re-raised as StoreError subclasses.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_pre_ping=True,
            connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
        )
        return cls(engine)

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except StoreError:
            raise
        except IntegrityError as e:
            logger.error(f"Constraint violated while {action}: {e.orig}")
            if is_unique_violation(e):
                raise DuplicateError(f"Duplicate key while {action}") from e
            raise PersistenceError(f"Constraint violated while {action}") from e
        except SQLAlchemyError as e:
            logger.error(f"Database error while {action}: {e}")
            raise PersistenceError(f"Database error while {action}") from e

    def initialize(self) -> None:
        """Create every table that does not exist yet"""
        try:
            SQLModel.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.critical(f"Error creating tables: {e}")
            raise SchemaError("Could not create tables") from e

    def dispose(self) -> None:
        self.engine.dispose()

    # Users

    def create_user(self, email: str, password: str) -> str:
        hashed_password = get_password_hash(password)
        user_id = generate_id(USER_ID_LENGTH)

        with self._session("creating user") as session:
            session.add(User(id=user_id, email=email, password=hashed_password))
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                taken = session.exec(select(User.id).where(User.email == email)).first()
                if taken is not None:
                    logger.warning(f"Signup with an already registered email: {email}")
                    raise DuplicateEmailError(f"Email already registered: {email}") from e
                raise

        return user_id

    def get_user(self, user_id: str) -> UserPublic:
        with self._session("fetching user") as session:
            user = session.get(User, user_id)
            if user is None:
                raise NotFoundError(f"User {user_id} not found")
            return UserPublic.model_validate(user)

    def get_user_by_email(self, email: str) -> PrivateUser:
        with self._session("fetching user by email") as session:
            user = session.exec(select(User).where(User.email == email)).first()
            if user is None:
                raise NotFoundError(f"No user with email {email}")
            return PrivateUser.model_validate(user)

    def update_user(self, user_id: str, name: str, bio: str) -> None:
        """Overwrite name and bio. Empty strings are stored as given."""
        with self._session("updating user") as session:
            user = session.get(User, user_id)
            if user is None:
                logger.warning(f"Update for unknown user {user_id} ignored")
                return
            user.name = name
            user.bio = bio
            session.add(user)
            session.commit()

    # Sessions

    def create_session(self, user_id: str) -> str:
        session_id = generate_id(SESSION_ID_LENGTH)
        with self._session("creating session") as session:
            session.add(AuthSession(session_id=session_id, user_id=user_id))
            session.commit()
        return session_id

    def get_session(self, session_id: str) -> str:
        """Resolve a session token to the id of the user it belongs to"""
        with self._session("resolving session") as session:
            auth_session = session.get(AuthSession, session_id)
            if auth_session is None:
                raise NotFoundError("Unknown session")
            return auth_session.user_id

    def delete_session(self, session_id: str) -> None:
        with self._session("deleting session") as session:
            auth_session = session.get(AuthSession, session_id)
            if auth_session is None:
                return
            session.delete(auth_session)
            session.commit()

    # Posts

    def create_post(self, user_id: str, content: str) -> str:
        post_id = generate_id(POST_ID_LENGTH)
        with self._session("creating post") as session:
            session.add(Post(id=post_id, user_id=user_id, content=content))
            session.commit()
        return post_id

    def get_post(self, post_id: str) -> Post:
        with self._session("fetching post") as session:
            post = session.get(Post, post_id)
            if post is None:
                raise NotFoundError(f"Post {post_id} not found")
            return post

    def get_posts_by_user(self, user_id: str) -> List[Post]:
        """Posts written by a user, newest first"""
        with self._session("fetching user posts") as session:
            statement = (
                select(Post)
                .where(Post.user_id == user_id)
                .order_by(Post.created_at.desc(), Post.id.desc())
            )
            return list(session.exec(statement).all())

    def get_full_post(self, post_id: str) -> FullPost:
        with self._session("fetching full post") as session:
            row = session.exec(
                select(Post, User)
                .join(User, Post.user_id == User.id)
                .where(Post.id == post_id)
            ).first()
            if row is None:
                raise NotFoundError(f"Post {post_id} not found")
            post, author = row
            post_public = PostPublic.model_validate(post)
            author_public = UserPublic.model_validate(author)

        # Separate round trip, so the result is not a single snapshot
        likes = self.post_likes(post_id)
        return FullPost(post=post_public, user=author_public, likes=likes)

    # Likes

    def like_post(self, user_id: str, post_id: str) -> None:
        """Record a like. Liking an already liked post changes nothing."""
        like_id = generate_id(LIKE_ID_LENGTH)
        with self._session("liking post") as session:
            session.add(Like(id=like_id, user_id=user_id, post_id=post_id))
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                if is_unique_violation(e):
                    existing = session.exec(
                        select(Like.id).where(Like.user_id == user_id, Like.post_id == post_id)
                    ).first()
                    if existing is not None:
                        logger.debug(f"Post {post_id} already liked by {user_id}")
                        return
                raise

    def unlike_post(self, user_id: str, post_id: str) -> None:
        with self._session("unliking post") as session:
            likes = session.exec(
                select(Like).where(Like.user_id == user_id, Like.post_id == post_id)
            ).all()
            for like in likes:
                session.delete(like)
            session.commit()

    def post_likes(self, post_id: str) -> List[Like]:
        with self._session("fetching likes") as session:
            statement = select(Like).where(Like.post_id == post_id).order_by(Like.created_at)
            return list(session.exec(statement).all())

    def is_liked(self, user_id: str, post_id: str) -> bool:
        with self._session("checking like status") as session:
            like_id = session.exec(
                select(Like.id).where(Like.user_id == user_id, Like.post_id == post_id)
            ).first()
            return like_id is not None
