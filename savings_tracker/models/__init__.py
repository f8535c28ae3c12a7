# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from savings_tracker.models.goal import Goal
from savings_tracker.models.contribution import Contribution

__all__ = [
    "Goal",
    "Contribution",
]
