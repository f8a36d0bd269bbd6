from typing import Optional
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import UserCreate
from app.core.exceptions import DuplicateIdentity, InvalidCredentials
from app.core.security import get_password_hash, verify_password

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email."""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def create_user(db: Session, user_in: UserCreate) -> User:
        """
        Create new user.

        Uniqueness of username and email is left to the table constraints, so
        two concurrent registrations can't both succeed.
        """
        db_user = User(
            username=user_in.username,
            email=user_in.email,
            hashed_password=get_password_hash(user_in.password),
        )
        db.add(db_user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info(f"Registration rejected, duplicate username or email: {user_in.username}")
            raise DuplicateIdentity()
        db.refresh(db_user)
        logger.info(f"Registered user {db_user.id} ({db_user.username})")
        return db_user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> User:
        """Authenticate user by email and password."""
        user = UserService.get_user_by_email(db, email)
        if not user:
            raise InvalidCredentials("User not found")
        if not verify_password(password, user.hashed_password):
            raise InvalidCredentials("Invalid password")
        return user
