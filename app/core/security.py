from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import Forbidden, Unauthenticated
from app.schemas.token import TokenPayload

# Cost 10 keeps a verification around 100ms
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash from plain password."""
    return pwd_context.hash(password)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionIssuer:
    """
    Issues and validates stateless session tokens.

    Tokens are HS256 JWTs carrying ``id`` and ``username`` and expire a fixed
    number of minutes after issuance. Nothing is stored server side, so
    rotating ``JWT_SECRET_KEY`` invalidates every outstanding token.
    """

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = _utcnow):
        self._secret_key = settings.JWT_SECRET_KEY
        self._algorithm = settings.ALGORITHM
        self._lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self._clock = clock

    def issue(self, user: Any) -> str:
        """Create a signed token for a user (anything with ``id`` and ``username``)."""
        current_time = self._clock()
        expire = current_time + self._lifetime

        to_encode = {
            "id": user.id,
            "username": user.username,
            "iat": int(current_time.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: Optional[str]) -> TokenPayload:
        """
        Verify and decode a token.

        Raises:
            Unauthenticated: no token supplied
            Forbidden: bad signature, malformed claims, or expired
        """
        if not token:
            raise Unauthenticated()

        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
            token_data = TokenPayload(**payload)
        except (JWTError, ValidationError, TypeError):
            raise Forbidden()

        if self._clock() >= token_data.exp:
            raise Forbidden("Token has expired")

        return token_data
