from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Text, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class Milestone(Base):
    """Recovery milestones the user records (first run, flexion to 120, ...)."""
    __tablename__ = "milestones"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(25), ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    type = Column(String(40), nullable=False)
    value = Column(String(200), nullable=True)  # "2 miles" for a first run
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="milestones")

    __table_args__ = (
        Index("ix_milestone_user_date", "user_id", "date"),
    )
