import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from teamtasks.config import Settings
from teamtasks.database import Base, build_engine, build_session_factory
from teamtasks.main import create_app
from teamtasks.models import Team, User, UserRole

from .factories import TEST_DATABASE_URL, create_team, create_user, test_settings

engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
TestingSessionLocal = build_session_factory(engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings() -> Settings:
    return test_settings


@pytest.fixture
def app():
    return create_app(test_settings, engine=engine)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin(db_session: Session) -> User:
    return create_user(db_session, name="Admin User", email="admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def member(db_session: Session) -> User:
    return create_user(db_session, name="Member User", email="member@example.com")


@pytest.fixture
def team(db_session: Session) -> Team:
    return create_team(db_session)
