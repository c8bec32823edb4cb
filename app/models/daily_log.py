"""
Daily Log Model

Append-one-per-day check-in of pain, instability, sleep and range of motion.
"""

from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Integer, Boolean, Text, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class DailyLog(Base):
    __tablename__ = "daily_logs"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(25), ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    # Scores (0-10)
    pain = Column(Integer, nullable=False)
    instability = Column(Integer, nullable=False)  # "feels like it could pop"
    sleep_impact = Column(Integer, nullable=False)

    # Range of motion self-assessment
    flexion_bucket = Column(String(10), nullable=False)  # "<60", "60-90", ..., "150+"
    abduction_bucket = Column(String(10), nullable=False)
    behind_back_reach = Column(String(20), nullable=False)  # "cant", "waistband", "mid-back", "shoulder-blade"

    sling_worn = Column(Boolean, default=False, nullable=False)
    did_rehab = Column(Boolean, default=False, nullable=False)
    did_cardio = Column(Boolean, default=False, nullable=False)
    did_strength = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="daily_logs")

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_log_user_date"),
        Index("ix_daily_log_user_date", "user_id", "date"),
    )

    def __repr__(self):
        return f"<DailyLog {self.user_id} {self.date} - Pain: {self.pain}/10>"
