"""
Unit tests for the credential store.
"""

import pytest

from app.core.exceptions import DuplicateIdentity, InvalidCredentials
from app.db.database import create_db_engine, create_session_factory, init_db
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.user_service import UserService


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


def _user(username="alice", email="alice@x.com", password="pw123") -> UserCreate:
    return UserCreate(username=username, email=email, password=password)


def test_create_user_stores_hash_only(db):
    user = UserService.create_user(db, _user())

    assert user.id is not None
    assert user.created_at is not None
    assert user.hashed_password != "pw123"


def test_same_username_and_email_cannot_register_twice(db):
    UserService.create_user(db, _user())

    with pytest.raises(DuplicateIdentity):
        UserService.create_user(db, _user())

    assert db.query(User).count() == 1


def test_duplicate_email_alone_is_rejected(db):
    UserService.create_user(db, _user())

    with pytest.raises(DuplicateIdentity):
        UserService.create_user(db, _user(username="alice2"))


def test_duplicate_username_alone_is_rejected(db):
    UserService.create_user(db, _user())

    with pytest.raises(DuplicateIdentity):
        UserService.create_user(db, _user(email="other@x.com"))


def test_session_usable_after_duplicate(db):
    UserService.create_user(db, _user())
    with pytest.raises(DuplicateIdentity):
        UserService.create_user(db, _user())

    bob = UserService.create_user(db, _user(username="bob", email="bob@x.com"))
    assert bob.id is not None


def test_get_user_by_email(db):
    created = UserService.create_user(db, _user())

    assert UserService.get_user_by_email(db, "alice@x.com").id == created.id
    assert UserService.get_user_by_email(db, "nobody@x.com") is None


def test_authenticate(db):
    created = UserService.create_user(db, _user())

    assert UserService.authenticate(db, "alice@x.com", "pw123").id == created.id

    with pytest.raises(InvalidCredentials, match="Invalid password"):
        UserService.authenticate(db, "alice@x.com", "wrong")

    with pytest.raises(InvalidCredentials, match="User not found"):
        UserService.authenticate(db, "nobody@x.com", "pw123")
