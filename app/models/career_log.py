from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from app.db.database import Base

class CareerLog(Base):
    __tablename__ = "career_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    education = Column(String(255))
    major = Column(String(255))
    skills = Column(Text)
    interests = Column(Text)
    goals = Column(Text)
    generated_content = Column(JSON().with_variant(JSONB, "postgresql"))  # {kind: markup}
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="career_logs")
