"""
Unit tests for password hashing and the session issuer.
"""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from app.core.config import Settings
from app.core.exceptions import Forbidden, Unauthenticated
from app.core.security import SessionIssuer, get_password_hash, verify_password
from tests.conftest import FrozenClock

USER = SimpleNamespace(id=7, username="alice")


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def issuer(settings, clock):
    return SessionIssuer(settings, clock=clock)


class TestPasswordHashing:
    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = get_password_hash("pw123")

        assert hashed != "pw123"
        assert hashed.startswith("$2")
        assert verify_password("pw123", hashed)
        assert not verify_password("wrong", hashed)

    def test_hash_is_salted(self):
        assert get_password_hash("pw123") != get_password_hash("pw123")


class TestSessionIssuer:
    def test_token_carries_identity(self, issuer):
        payload = issuer.validate(issuer.issue(USER))

        assert payload.id == 7
        assert payload.username == "alice"

    def test_expiry_is_one_hour_after_issue(self, issuer, clock):
        payload = issuer.validate(issuer.issue(USER))

        assert payload.exp - payload.iat == timedelta(hours=1)
        assert payload.iat == clock.now

    def test_valid_just_before_expiry(self, issuer, clock):
        token = issuer.issue(USER)
        clock.now = clock.now + timedelta(minutes=59, seconds=59)

        assert issuer.validate(token).id == 7

    def test_rejected_at_expiry_instant(self, issuer, clock):
        token = issuer.issue(USER)
        clock.now = clock.now + timedelta(hours=1)

        with pytest.raises(Forbidden):
            issuer.validate(token)

    def test_rejected_after_expiry(self, issuer, clock):
        token = issuer.issue(USER)
        clock.now = clock.now + timedelta(hours=1, seconds=1)

        with pytest.raises(Forbidden):
            issuer.validate(token)

    def test_token_signed_with_other_secret_is_forbidden(self, issuer, settings, clock):
        other_settings = settings.model_copy(update={"JWT_SECRET_KEY": "another-secret"})
        forged = SessionIssuer(other_settings, clock=clock).issue(USER)

        with pytest.raises(Forbidden):
            issuer.validate(forged)

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_is_unauthenticated(self, issuer, token):
        with pytest.raises(Unauthenticated):
            issuer.validate(token)

    def test_garbage_token_is_forbidden(self, issuer):
        with pytest.raises(Forbidden):
            issuer.validate("not-a-jwt")

    def test_token_missing_claims_is_forbidden(self, issuer, settings, clock):
        token = jwt.encode(
            {"id": 7, "exp": int((clock.now + timedelta(hours=1)).timestamp())},
            settings.JWT_SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(Forbidden):
            issuer.validate(token)

    def test_lifetime_follows_settings(self, clock):
        settings = Settings(JWT_SECRET_KEY="s", ACCESS_TOKEN_EXPIRE_MINUTES=5)
        issuer = SessionIssuer(settings, clock=clock)
        token = issuer.issue(USER)

        clock.now = clock.now + timedelta(minutes=5)
        with pytest.raises(Forbidden):
            issuer.validate(token)
