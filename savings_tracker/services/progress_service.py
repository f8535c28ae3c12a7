"""
progress_service.py — Goal progress
Sums a goal's contributions and reports how far along the target it is.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from savings_tracker.services.goal_service import GoalService
from savings_tracker.services.contribution_service import ContributionService


@dataclass(frozen=True)
class Progress:
    goal_id: str
    title: str
    total_contributed: float
    target_amount: float
    percent_complete: float  # 0..100, two decimals


def percent_of_target(total: float, target: float) -> float:
    """Share of ``target`` covered by ``total``, capped at 100.

    Halves round up (0.125 -> 0.13) so the two-decimal string matches what
    existing clients were given.
    """
    percent = min(total / target * 100, 100.0)
    return float(Decimal(percent).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class ProgressService:
    @staticmethod
    def get_progress(db: Session, goal_id: str) -> Progress:
        # Two independent reads; a concurrent insert may not be reflected yet.
        goal = GoalService.get_by_id(db, goal_id)
        contributions = ContributionService.list_by_goal(db, goal_id)
        total = sum((c.amount for c in contributions), 0.0)
        return Progress(
            goal_id=goal.id,
            title=goal.title,
            total_contributed=total,
            target_amount=goal.target_amount,
            percent_complete=percent_of_target(total, goal.target_amount),
        )
