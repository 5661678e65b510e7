import pytest

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


@pytest.mark.django_db
def test_register_returns_token_and_user(api_client):
    response = api_client.post(
        REGISTER_URL,
        {"name": "Meera", "email": "Meera@Example.com", "password": "secret123"},
        format="json",
    )

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["name"] == "Meera"
    assert body["user"]["email"] == "meera@example.com"


@pytest.mark.django_db
@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@example.com", "password": "secret123"},
        {"name": "A", "email": "not-an-email", "password": "secret123"},
        {"name": "A", "email": "a@example.com", "password": "123"},
    ],
)
def test_register_rejects_bad_input(api_client, payload):
    assert api_client.post(REGISTER_URL, payload, format="json").status_code == 400


@pytest.mark.django_db
def test_register_rejects_duplicate_email(api_client, user):
    response = api_client.post(
        REGISTER_URL,
        {"name": "Other", "email": "asha@example.com", "password": "secret123"},
        format="json",
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"


@pytest.mark.django_db
def test_login(api_client, user):
    bad = api_client.post(
        LOGIN_URL, {"email": "asha@example.com", "password": "wrong"}, format="json"
    )
    assert bad.status_code == 401

    good = api_client.post(
        LOGIN_URL, {"email": "asha@example.com", "password": "secret123"}, format="json"
    )
    assert good.status_code == 200
    token = good.json()["token"]

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    me = api_client.get("/api/auth/me").json()
    assert me == {"id": user.id, "name": "Asha", "email": "asha@example.com"}


@pytest.mark.django_db
def test_me_requires_token(api_client):
    assert api_client.get("/api/auth/me").status_code == 401


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
    assert client.get("/healthz").status_code == 200
