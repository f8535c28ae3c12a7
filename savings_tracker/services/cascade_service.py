import logging

from sqlalchemy.orm import Session

from savings_tracker.services.contribution_service import ContributionService

logger = logging.getLogger(__name__)


class CascadeService:
    @staticmethod
    def on_goal_deleted(db: Session, goal_id: str) -> int:
        """Drop the goal's contributions inside the caller's transaction.

        Nothing is committed here; GoalService.delete commits the goal
        removal and this cascade together.
        """
        removed = ContributionService.delete_all_by_goal(db, goal_id, commit=False)
        logger.debug(f"Cascade removed {removed} contribution(s) of goal {goal_id}")
        return removed
