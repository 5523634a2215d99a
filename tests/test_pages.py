from fastapi import status


def test_health(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert "OK" in response.text

def test_home_redirects_without_cookie(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/auth"

def test_home_renders_with_cookie(auth_client):
    response = auth_client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert 'id="post-form"' in response.text

def test_auth_page_renders_without_cookie(client):
    response = client.get("/auth")
    assert response.status_code == status.HTTP_200_OK
    assert 'id="signup-form"' in response.text

def test_auth_page_redirects_with_cookie(auth_client):
    response = auth_client.get("/auth", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/"

def test_static_assets(client):
    assert client.get("/static/style.css").status_code == status.HTTP_200_OK

def test_metrics_exposed(client):
    client.get("/health")
    response = client.get("/metrics")
    assert response.status_code == status.HTTP_200_OK
    assert "murmur_users_created_total" in response.text
