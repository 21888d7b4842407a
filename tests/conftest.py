"""
Shared fixtures for QuillBlog tests.

Every test gets a fresh in-memory SQLite database built through the same
engine factory the application uses, so foreign-key cascades are on.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from quillblog import crud, schemas
from quillblog.api import deps
from quillblog.core.security import create_access_token
from quillblog.db.base import Base
from quillblog.db.session import create_db_engine
from quillblog.main import app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, username="alice", email=None, password="secret123"):
    return crud.create_user(
        db,
        schemas.UserCreate(username=username, email=email or f"{username}@example.com", password=password),
    )


def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.username)}"}


def make_post(db, user, title="Hello", content="# Hello\n\nWorld", excerpt=None):
    return crud.create_post(db, user.id, schemas.PostCreate(title=title, content=content, excerpt=excerpt))


@pytest.fixture
def alice(db):
    return make_user(db, "alice")


@pytest.fixture
def bob(db):
    return make_user(db, "bob")
