import os

os.environ.setdefault("SQLALCHEMY_DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("AWS_BUCKET_NAME", "pixfeed-test")
os.environ.setdefault("IMAGE_BASE_URL", "https://images.example.com")

from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base, get_db
from app.models.like import Like
from app.models.post import Post
from app.models.user import User
from app.schemas.auth import SessionUser
from app.services.token import token_codec
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    sequence = count(1)

    def _make_user(username=None):
        n = next(sequence)
        username = username or f"user{n}"
        user = User(
            email=f"{username}@example.com",
            username=username,
            full_name=f"User {n}",
            profile_image_url=f"https://lh3.googleusercontent.com/{username}",
            is_verified=True,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_post(db_session):
    base_time = datetime(2025, 1, 1, 12, 0, 0)
    sequence = count(0)

    def _make_post(author, content=None):
        n = next(sequence)
        post = Post(
            content=content or f"post {n}",
            img_url=f"https://images.example.com/pixfeed/images/{n}.png",
            author_id=author.id,
            created_at=base_time + timedelta(minutes=n),
        )
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post


@pytest.fixture
def make_like(db_session):
    def _make_like(user, post):
        db_session.add(Like(user_id=user.id, post_id=post.id))
        db_session.commit()

    return _make_like


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = token_codec.issue(SessionUser(id=user.id, username=user.username))
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
