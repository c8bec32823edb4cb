from sqlalchemy import Column, String, ForeignKey, DateTime, Date, JSON, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class WorkoutCompletion(Base):
    """
    Snapshot of a generated workout the user confirmed doing.
    The planner never reads these back.
    """
    __tablename__ = "workout_completions"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(25), ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    kind = Column(String(20), nullable=False)  # "rehab", "fitness"
    workout_payload = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="workout_completions")

    __table_args__ = (
        Index("ix_workout_completion_user_date", "user_id", "date"),
    )
