import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

from teamtasks.api.v1 import users as user_routes
from teamtasks.models import User, UserRole
from teamtasks.schemas import UserCreate

from .factories import auth_header, create_user


def test_create_user_defaults_to_member_and_hides_password(client, db_session: Session):
    response = client.post(
        "/users",
        json={"name": "John Doe", "email": "john@example.com", "password": "123456"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "John Doe"
    assert body["email"] == "john@example.com"
    assert body["role"] == "member"
    assert "password" not in body
    assert "passwordHash" not in body
    assert "createdAt" in body


def test_create_user_with_admin_role(client):
    response = client.post(
        "/users",
        json={"name": "Admin Person", "email": "boss@example.com", "password": "123456", "role": "admin"},
    )

    assert response.status_code == 200
    assert response.json()["role"] == "admin"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "John Doe", "email": "invalid-email", "password": "123456"},
        {"name": "John", "email": "john@example.com", "password": "123456"},
        {"name": "John Doe", "email": "john@example.com", "password": "123"},
        {"name": "John Doe", "email": "john@example.com", "password": "123456", "role": "owner"},
        {"email": "john@example.com", "password": "123456"},
    ],
)
def test_create_user_rejects_invalid_payload(client, payload):
    response = client.post("/users", json=payload)

    assert response.status_code == 400
    assert "message" in response.json()


def test_create_user_rejects_duplicate_email(client, db_session: Session):
    create_user(db_session, email="john@example.com")

    response = client.post(
        "/users",
        json={"name": "John Doe", "email": "john@example.com", "password": "123456"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Email is already use"


def test_password_is_hashed_before_saving(db_session: Session, settings):
    user = user_routes.create_user(
        UserCreate(name="John Doe", email="john@example.com", password="123456"),
        db_session,
        settings,
    )

    stored = db_session.query(User).filter(User.email == "john@example.com").one()
    assert stored.id == user.id
    assert stored.password_hash != "123456"
    assert stored.password_hash.startswith("$2")
    assert stored.role == UserRole.MEMBER


def test_duplicate_email_via_route_function(db_session: Session, settings):
    user_in = UserCreate(name="John Doe", email="john@example.com", password="123456")
    user_routes.create_user(user_in, db_session, settings)

    with pytest.raises(HTTPException) as exc:
        user_routes.create_user(user_in, db_session, settings)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Email is already use"


def test_read_current_user(client, member):
    response = client.get("/users/me", headers=auth_header(member))

    assert response.status_code == 200
    assert response.json()["id"] == str(member.id)
    assert response.json()["email"] == member.email


def test_read_current_user_requires_token(client):
    response = client.get("/users/me")

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid JWT Token"
