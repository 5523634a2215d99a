from prometheus_client import Counter

users_created_total = Counter(
    "murmur_users_created_total",
    "Total number of users created through signup"
)

sessions_created_total = Counter(
    "murmur_sessions_created_total",
    "Total number of sessions issued at signup or login"
)

posts_created_total = Counter(
    "murmur_posts_created_total",
    "Total number of posts created"
)
