"""
contribution_service.py — Contribution store
Logs deposits against an existing goal, lists them and removes them.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from savings_tracker import config
from savings_tracker.errors import StoreError, NotFoundError, ValidationError
from savings_tracker.models.contribution import Contribution
from savings_tracker.services.goal_service import GoalService
from savings_tracker.validators import validate_positive_amount

logger = logging.getLogger(__name__)


class ContributionService:
    @staticmethod
    def create(db: Session, data: dict, reject_over_target: bool | None = None) -> Contribution:
        """Insert a contribution once its goal is known to exist.

        With ``reject_over_target`` (defaults to the REJECT_OVER_TARGET setting)
        a deposit that would push the total past the goal's target is refused.
        """
        goal = GoalService.get_by_id(db, data.get("goal_id"))
        amount = validate_positive_amount(data.get("amount"), "amount")

        if reject_over_target is None:
            reject_over_target = config.REJECT_OVER_TARGET
        if reject_over_target:
            total = ContributionService.total_for_goal(db, goal.id)
            remaining = goal.target_amount - total
            if amount > remaining:
                raise ValidationError(
                    "amount exceeds the remaining amount for this goal",
                    details={"remaining": max(remaining, 0.0)},
                )

        c = Contribution(
            goal_id=goal.id,
            amount=amount,
            note=data.get("note"),
            date=data.get("date") or datetime.now(timezone.utc),
        )
        try:
            db.add(c)
            db.commit()
            db.refresh(c)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create contribution for goal {goal.id}: {e}")
            raise StoreError("Could not create contribution") from e
        logger.info(f"Added contribution {c.id} of {c.amount} to goal {goal.id}")
        return c

    @staticmethod
    def list_by_goal(db: Session, goal_id: str) -> list[Contribution]:
        """Newest first; an unknown goal just has no contributions."""
        try:
            return (
                db.query(Contribution)
                .filter_by(goal_id=goal_id)
                .order_by(Contribution.date.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list contributions for goal {goal_id}: {e}")
            raise StoreError("Could not fetch contributions") from e

    @staticmethod
    def total_for_goal(db: Session, goal_id: str) -> float:
        try:
            total = db.query(func.sum(Contribution.amount)).filter_by(goal_id=goal_id).scalar()
        except SQLAlchemyError as e:
            logger.error(f"Failed to sum contributions for goal {goal_id}: {e}")
            raise StoreError("Could not fetch contributions") from e
        return total or 0.0

    @staticmethod
    def delete(db: Session, contribution_id: str) -> None:
        try:
            c = db.query(Contribution).filter_by(id=contribution_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch contribution {contribution_id}: {e}")
            raise StoreError("Could not fetch contribution") from e
        if not c:
            raise NotFoundError("Contribution", contribution_id)
        try:
            db.delete(c)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete contribution {contribution_id}: {e}")
            raise StoreError("Could not delete contribution") from e
        logger.info(f"Deleted contribution {contribution_id}")

    @staticmethod
    def delete_all_by_goal(db: Session, goal_id: str, commit: bool = True) -> int:
        """Remove every contribution of a goal. Idempotent.

        With ``commit=False`` the caller owns the transaction.
        """
        try:
            removed = (
                db.query(Contribution)
                .filter_by(goal_id=goal_id)
                .delete(synchronize_session=False)
            )
            if commit:
                db.commit()
        except SQLAlchemyError as e:
            if commit:
                db.rollback()
                logger.error(f"Failed to delete contributions for goal {goal_id}: {e}")
                raise StoreError("Could not delete contributions") from e
            raise
        return removed
