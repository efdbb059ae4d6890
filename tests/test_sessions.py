import jwt
from sqlalchemy.orm import Session

from teamtasks.models import UserRole

from .factories import create_user


def test_login_with_valid_credentials(client, db_session: Session, settings):
    user = create_user(db_session, email="john@example.com", password="123456")

    response = client.post("/sessions", json={"email": "john@example.com", "password": "123456"})

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["token"], str)
    assert body["user"]["id"] == str(user.id)
    assert body["user"]["email"] == user.email
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]

    claims = jwt.decode(body["token"], settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert claims["sub"] == str(user.id)
    assert claims["role"] == "member"
    assert claims["exp"] - claims["iat"] == settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60


def test_login_with_unknown_email(client, db_session: Session):
    create_user(db_session, email="john@example.com")

    response = client.post("/sessions", json={"email": "nobody@example.com", "password": "123456"})

    assert response.status_code == 401
    assert response.json()["message"] == "email ou senha errada!"


def test_login_with_wrong_password(client, db_session: Session):
    create_user(db_session, email="john@example.com", password="123456")

    response = client.post("/sessions", json={"email": "john@example.com", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json()["message"] == "email ou senha errada!"


def test_login_rejects_invalid_email_format(client):
    response = client.post("/sessions", json={"email": "invalid-email", "password": "123456"})

    assert response.status_code == 400
    assert "message" in response.json()


def test_login_rejects_short_password(client):
    response = client.post("/sessions", json={"email": "john@example.com", "password": "123"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("password:")


def test_login_returns_admin_role(client, db_session: Session, settings):
    create_user(db_session, email="admin@example.com", role=UserRole.ADMIN)

    response = client.post("/sessions", json={"email": "admin@example.com", "password": "123456"})

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "admin"
    claims = jwt.decode(response.json()["token"], settings.JWT_SECRET_KEY, algorithms=["HS256"])
    assert claims["role"] == "admin"
