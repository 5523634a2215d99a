from auth.security import verify_password
from seed_data import DEMO_PASSWORD, create_test_data


def test_create_test_data(store):
    created = create_test_data(store, user_count=3, post_count=6, likes_per_user=2)

    assert created["users"] == 3
    assert created["posts"] == 6
    assert created["likes"] <= 6

def test_demo_users_can_log_in(store, monkeypatch):
    monkeypatch.setattr("seed_data.random.choice", lambda seq: seq[0])
    monkeypatch.setattr("seed_data.random.randint", lambda a, b: 7)

    create_test_data(store, user_count=1, post_count=2, likes_per_user=0)

    user = store.get_user_by_email("juan7@example.com")
    assert user.name == "Juan Domínguez"
    assert verify_password(DEMO_PASSWORD, user.password)
    assert len(store.get_posts_by_user(user.id)) == 2
