import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float
from savings_tracker.database import Base, UTCDateTime


def _utcnow():
    return datetime.now(timezone.utc)


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(500), nullable=False)
    target_amount = Column(Float, nullable=False)  # > 0, currency-agnostic
    image_url = Column(String(2048), nullable=True)  # externally hosted asset
    created_at = Column(UTCDateTime, default=_utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=_utcnow, onupdate=_utcnow, nullable=False)
