from typing import Generator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.security import SessionIssuer
from app.schemas.token import TokenPayload
from app.services.activity_log import ActivityLog
from app.services.generation_service import GenerationGateway

# Missing or non-bearer headers come through as None so we can answer 401 ourselves
bearer_scheme = HTTPBearer(auto_error=False)


# Dependency to get a DB session
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.session_issuer


def get_generation_gateway(request: Request) -> GenerationGateway:
    return request.app.state.generation_gateway


def get_activity_log(request: Request) -> ActivityLog:
    return request.app.state.activity_log


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session_issuer: SessionIssuer = Depends(get_session_issuer),
) -> TokenPayload:
    """Authenticate the request from its bearer token (401 when absent, 403 when rejected)."""
    token = credentials.credentials if credentials else None
    return session_issuer.validate(token)
