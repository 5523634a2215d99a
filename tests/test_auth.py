import pytest
from fastapi import status

from core.errors import NotFoundError


def test_signup_login_and_get_auth(client, store):
    response = client.post("/signup", data={"email": "a@b.com", "password": "pw123"})
    assert response.status_code == status.HTTP_200_OK
    assert response.text == "User created"
    signup_cookie = response.cookies.get("session_id")
    assert signup_cookie
    assert "Max-Age=3600" in response.headers["set-cookie"]

    response = client.post("/login", data={"email": "a@b.com", "password": "pw123"})
    assert response.status_code == status.HTTP_200_OK
    assert response.text == "User logged in"
    login_cookie = response.cookies.get("session_id")
    assert login_cookie and login_cookie != signup_cookie

    response = client.get("/get_auth")
    assert response.status_code == status.HTTP_200_OK
    assert response.text == store.get_user_by_email("a@b.com").id

def test_signup_requires_both_fields(client):
    response = client.post("/signup", data={"email": "a@b.com"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_signup_duplicate_email(client, user_id):
    response = client.post("/signup", data={"email": "test@example.com", "password": "x"})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.text == "Error creating user"
    assert "session_id" not in response.cookies

def test_login_missing_fields(client):
    response = client.post("/login", data={"email": "", "password": ""})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == "Email or password missing"

def test_login_wrong_password(client, user_id):
    response = client.post("/login", data={"email": "test@example.com", "password": "wrong"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "session_id" not in response.cookies

def test_login_unknown_email(client):
    response = client.post("/login", data={"email": "ghost@example.com", "password": "pw"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_get_auth_without_cookie(client):
    response = client.get("/get_auth")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == "Session cookie not found"

def test_get_auth_unknown_session(client):
    client.cookies.set("session_id", "unknownsession00")
    response = client.get("/get_auth")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_logout_deletes_session(auth_client, store):
    session_id = auth_client.cookies.get("session_id")

    response = auth_client.post("/logout")
    assert response.status_code == status.HTTP_200_OK
    assert response.text == "User logged out"

    with pytest.raises(NotFoundError):
        store.get_session(session_id)

def test_logout_without_cookie(client):
    response = client.post("/logout")
    assert response.status_code == status.HTTP_200_OK
