# tests/conftest.py — Shared test fixtures
import os

# Settings are read at import time, so the environment is prepared first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import taskboard.models  # noqa: F401
from taskboard.core.security import hash_password
from taskboard.database import Base, get_db
from taskboard.main import app
from taskboard.models import Category, Tag, Task, TaskStatus, TaskPriority, User, UserRole, UserStatus

PASSWORD = "Secret123"


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # One shared in-memory database per test
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """HTTP test client with overridden DB dependency"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(client):
    """Client that turns unhandled server errors into 500 responses"""
    return TestClient(app, raise_server_exceptions=False)


def _make_user(db_session, username, full_name, role=UserRole.EMPLOYEE, status=UserStatus.ACTIVE):
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password(PASSWORD),
        full_name=full_name,
        role=role,
        status=status,
        avatar_color="#5B8DEF",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, "alice", "Alice Admin", role=UserRole.ADMIN)


@pytest.fixture
def employee_user(db_session):
    return _make_user(db_session, "bob", "Bob Builder")


@pytest.fixture
def other_employee(db_session):
    return _make_user(db_session, "carol", "Carol Coder")


@pytest.fixture
def inactive_user(db_session):
    return _make_user(db_session, "dave", "Dave Dormant", status=UserStatus.INACTIVE)


@pytest.fixture
def category(db_session):
    row = Category(name="Backend", color="#5ECFB1")
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


@pytest.fixture
def tagged_task(db_session, admin_user):
    """A task created directly in the database (no activity rows)"""
    task = Task(
        title="Tagged task",
        status=TaskStatus.TO_DO,
        priority=TaskPriority.HIGH,
        created_by=admin_user,
        tags=[Tag(name="api"), Tag(name="bug")],
    )
    db_session.add(task)
    db_session.commit()
    db_session.refresh(task)
    return task
