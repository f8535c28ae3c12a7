"""
goal_service.py — Goal store
Create, list, look up, partially update and delete savings goals.
Deleting a goal cascades to its contributions in the same transaction.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from savings_tracker.errors import NotFoundError, StoreError
from savings_tracker.models.goal import Goal
from savings_tracker.validators import validate_title, validate_positive_amount, validate_image_url

logger = logging.getLogger(__name__)


class GoalService:
    @staticmethod
    def create(db: Session, data: dict) -> Goal:
        goal = Goal(
            title=validate_title(data.get("title")),
            target_amount=validate_positive_amount(data.get("target_amount"), "targetAmount"),
            image_url=validate_image_url(data.get("image_url")),
        )
        try:
            db.add(goal)
            db.commit()
            db.refresh(goal)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create goal: {e}")
            raise StoreError("Could not create goal") from e
        logger.info(f"Created goal {goal.id} ({goal.title!r}, target {goal.target_amount})")
        return goal

    @staticmethod
    def get_all(db: Session) -> list[Goal]:
        try:
            return db.query(Goal).order_by(Goal.created_at).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list goals: {e}")
            raise StoreError("Could not fetch goals") from e

    @staticmethod
    def get_by_id(db: Session, goal_id: str) -> Goal:
        try:
            goal = db.query(Goal).filter_by(id=goal_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch goal {goal_id}: {e}")
            raise StoreError("Could not fetch goal") from e
        if not goal:
            raise NotFoundError("Goal", goal_id)
        return goal

    @staticmethod
    def update(db: Session, goal_id: str, data: dict) -> Goal:
        """Merge only the supplied fields; an empty update is a no-op."""
        goal = GoalService.get_by_id(db, goal_id)
        if not data:
            return goal

        changes = {}
        if "title" in data:
            changes["title"] = validate_title(data["title"])
        if "target_amount" in data:
            changes["target_amount"] = validate_positive_amount(data["target_amount"], "targetAmount")
        if "image_url" in data:
            changes["image_url"] = validate_image_url(data["image_url"])
        if not changes:
            return goal

        try:
            for k, v in changes.items():
                setattr(goal, k, v)
            goal.updated_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(goal)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update goal {goal_id}: {e}")
            raise StoreError("Could not update goal") from e
        return goal

    @staticmethod
    def delete(db: Session, goal_id: str) -> int:
        """Delete a goal and its contributions atomically.

        Returns the number of contributions removed with it.
        """
        from savings_tracker.services.cascade_service import CascadeService

        goal = GoalService.get_by_id(db, goal_id)
        try:
            removed = CascadeService.on_goal_deleted(db, goal_id)
            db.delete(goal)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete goal {goal_id}: {e}")
            raise StoreError("Could not delete goal") from e
        logger.info(f"Deleted goal {goal_id} and {removed} contribution(s)")
        return removed
