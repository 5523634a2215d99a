from fastapi import status


def test_create_post_requires_auth(client, store, user_id):
    response = client.post(
        "/create_post",
        data={"content": "sneaky"},
        follow_redirects=False,
    )
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/auth"
    assert store.get_posts_by_user(user_id) == []

def test_create_post_with_unknown_session(client, store, user_id):
    client.cookies.set("session_id", "notarealsession0")
    response = client.post("/create_post", data={"content": "x"}, follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/auth"

def test_create_post_rejects_empty_content(auth_client, store, user_id):
    response = auth_client.post("/create_post", data={"content": ""})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == "Content cannot be empty"
    assert store.get_posts_by_user(user_id) == []

def test_create_and_get_post(auth_client, store, user_id):
    response = auth_client.post("/create_post", data={"content": "Test post content"})
    assert response.status_code == status.HTTP_200_OK
    post_id = response.text
    assert store.get_post(post_id).content == "Test post content"

    response = auth_client.get(f"/post/{post_id}")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["post"]["id"] == post_id
    assert body["post"]["content"] == "Test post content"
    assert body["user"]["id"] == user_id
    assert "password" not in body["user"]
    assert body["likes"] == []

def test_get_missing_post(client):
    response = client.get("/post/missing1")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_get_posts_renders_own_posts(auth_client, store, user_id):
    store.create_post(user_id, "mine")
    other_id = store.create_user("other@example.com", "pw")
    store.create_post(other_id, "theirs")

    response = auth_client.post("/get_posts")
    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/html")
    assert "mine" in response.text
    assert "theirs" not in response.text

def test_get_posts_requires_auth(client):
    response = client.post("/get_posts", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
