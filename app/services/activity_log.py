from typing import Dict

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import PersistenceError
from app.core.metrics import ACTIVITY_LOG_FAILURES
from app.models.career_log import CareerLog
from app.schemas.career import CareerProfile


class ActivityLog:
    """Append-only history of career analyses, one row per successful call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def append(self, user_id: int, profile: CareerProfile, generated_content: Dict[str, str]) -> int:
        """Insert a log entry and return its id. Raises PersistenceError on any store failure."""
        db = None
        try:
            db = self.session_factory()
            entry = CareerLog(
                user_id=user_id,
                education=profile.education,
                major=profile.major,
                skills=profile.skills,
                interests=profile.interests,
                goals=profile.goals,
                generated_content=generated_content,
            )
            db.add(entry)
            db.commit()
            db.refresh(entry)
            return entry.id
        except SQLAlchemyError as e:
            if db is not None:
                db.rollback()
            raise PersistenceError(str(e))
        finally:
            if db is not None:
                db.close()

    def record(self, user_id: int, profile: CareerProfile, generated_content: Dict[str, str]) -> None:
        """Best-effort append: failures are logged and counted, never raised."""
        try:
            entry_id = self.append(user_id, profile, generated_content)
            logger.info(f"Saved career log {entry_id} for user {user_id}")
        except PersistenceError as e:
            ACTIVITY_LOG_FAILURES.inc()
            logger.error(f"Error saving career log for user {user_id}: {e.message}")
