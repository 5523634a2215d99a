import logging
import random

from core.config import get_settings
from core.errors import DuplicateError
from core.logging_config import setup_logging
from store import Store

logger = logging.getLogger(__name__)

# Data pools
FIRST_NAMES = [
    "Juan", "María", "Alberto", "Lucía", "Pedro", "Ana", "Carlos", "Sofia",
    "John", "Emma", "Michael", "Sarah", "David", "Isabella", "James", "Laura"
]

LAST_NAMES = [
    "Domínguez", "García", "Rodríguez", "López", "Martínez", "González",
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis"
]

BIOS = [
    "Coffee first, code later",
    "Backend developer. Opinions are my own.",
    "Learning something new every day",
    "Gamer, reader, occasional runner",
    "",
]

POST_CONTENTS = [
    "Just finished my first project with Vue.js! 🚀",
    "Anyone else loving the new TypeScript features? #coding",
    "Beautiful day for a coffee and some coding ☕️",
    "Finally solved that bug that was driving me crazy! 🐛",
    "Learning FastAPI has been an amazing journey",
    "Who's up for a game of Valorant tonight? 🎮",
    "Just deployed my first full-stack application! 🎉",
    "Does anyone have good resources for learning Docker?",
    "The new VS Code update is amazing! 💻"
]

DEMO_PASSWORD = "password123"


def create_test_data(store: Store, user_count: int = 10, post_count: int = 50, likes_per_user: int = 5) -> dict:
    """Fill the database with demo users, posts and likes through the store.

    Every demo user logs in with DEMO_PASSWORD. Returns how many rows of
    each kind were created.
    """
    user_ids = []
    for _ in range(user_count):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        handle = f"{first_name.lower()}{random.randint(1, 9999)}"
        try:
            user_id = store.create_user(f"{handle}@example.com", DEMO_PASSWORD)
        except DuplicateError:
            logger.warning(f"Demo user {handle} already exists, skipping")
            continue
        store.update_user(user_id, f"{first_name} {last_name}", random.choice(BIOS))
        user_ids.append(user_id)

    post_ids = {}
    if user_ids:
        for _ in range(post_count):
            author_id = random.choice(user_ids)
            post_ids[store.create_post(author_id, random.choice(POST_CONTENTS))] = author_id

    like_count = 0
    for user_id in user_ids:
        # Each user likes a few posts written by someone else
        possible_likes = [post_id for post_id, author_id in post_ids.items() if author_id != user_id]
        for post_id in random.sample(possible_likes, min(likes_per_user, len(possible_likes))):
            store.like_post(user_id, post_id)
            like_count += 1

    logger.info(
        f"Demo data created: {len(user_ids)} users, {len(post_ids)} posts, {like_count} likes"
    )
    return {"users": len(user_ids), "posts": len(post_ids), "likes": like_count}

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    store = Store.from_settings(settings)
    store.initialize()
    create_test_data(store)
