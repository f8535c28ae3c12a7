import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Float, ForeignKey
from savings_tracker.database import Base, UTCDateTime


class Contribution(Base):
    __tablename__ = "contributions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    goal_id = Column(String(36), ForeignKey("goals.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    note = Column(Text, nullable=True)
    date = Column(UTCDateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
