"""
Recovery Profile Model

One injury and goal profile per user. Restrictions and goal are stored as
JSON documents and validated by the pydantic schemas on the way in and out.
"""

from sqlalchemy import Column, String, ForeignKey, DateTime, Date, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database.base import Base
import cuid


class RecoveryProfileRecord(Base):
    __tablename__ = "recovery_profiles"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(25), ForeignKey("users.id"), nullable=False, unique=True, index=True)

    # Injury
    injury_side = Column(String(10), nullable=False)  # "left", "right", "both"
    injury_date = Column(Date, nullable=False)
    surgery_status = Column(String(20), nullable=False, default="none")  # "none", "planned", "post-op"
    surgery_date = Column(Date, nullable=True)

    # {"in_sling": false, "max_flexion_angle": 90, ...}
    restrictions = Column(JSON, nullable=False, default=dict)
    # {"type": "10k", "days_per_week": 4, ...}
    goal = Column(JSON, nullable=False, default=dict)

    # Week numbers in the fitness plan count from here
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="recovery_profile")

    def __repr__(self):
        return f"<RecoveryProfile {self.user_id} - {self.injury_side} ({self.surgery_status})>"
