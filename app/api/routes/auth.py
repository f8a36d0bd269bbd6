from typing import Any

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_session_issuer
from app.core.security import SessionIssuer
from app.schemas.token import LoginResponse, UserLogin
from app.schemas.user import RegisterResponse, UserCreate, UserSummary
from app.services.user_service import UserService

router = APIRouter()

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db)
) -> Any:
    """Register a new user."""
    user = UserService.create_user(db, user_in)
    return RegisterResponse(user=UserSummary.model_validate(user))

@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    session_issuer: SessionIssuer = Depends(get_session_issuer)
) -> Any:
    """Login for a session token."""
    user = UserService.authenticate(db, credentials.email, credentials.password)
    token = session_issuer.issue(user)
    logger.info(f"User {user.id} logged in")
    return LoginResponse(token=token, username=user.username)
