from app.models.user import User
from app.models.career_log import CareerLog

__all__ = ["User", "CareerLog"]
