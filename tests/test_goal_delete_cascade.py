import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from savings_tracker.errors import StoreError
from savings_tracker.models.contribution import Contribution
from savings_tracker.services.cascade_service import CascadeService
from savings_tracker.services.contribution_service import ContributionService
from savings_tracker.services.goal_service import GoalService


def test_delete_goal_cascade(session):
    goal = GoalService.create(session, {"title": "Bike", "target_amount": 200})
    other = GoalService.create(session, {"title": "Laptop", "target_amount": 900})
    ContributionService.create(session, {"goal_id": goal.id, "amount": 50})
    ContributionService.create(session, {"goal_id": goal.id, "amount": 70})
    kept = ContributionService.create(session, {"goal_id": other.id, "amount": 30})

    assert GoalService.delete(session, goal.id) == 2

    assert [g.id for g in GoalService.get_all(session)] == [other.id]
    assert ContributionService.list_by_goal(session, goal.id) == []
    assert [c.id for c in ContributionService.list_by_goal(session, other.id)] == [kept.id]


def test_cascade_does_not_commit(session):
    goal = GoalService.create(session, {"title": "Bike", "target_amount": 200})
    ContributionService.create(session, {"goal_id": goal.id, "amount": 50})

    assert CascadeService.on_goal_deleted(session, goal.id) == 1
    session.rollback()

    assert len(ContributionService.list_by_goal(session, goal.id)) == 1


def test_failed_goal_delete_keeps_contributions(session, monkeypatch):
    goal = GoalService.create(session, {"title": "Bike", "target_amount": 200})
    ContributionService.create(session, {"goal_id": goal.id, "amount": 50})

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(session, "commit", failing_commit)
    with pytest.raises(StoreError):
        GoalService.delete(session, goal.id)
    monkeypatch.undo()

    assert GoalService.get_by_id(session, goal.id).title == "Bike"
    assert session.query(Contribution).filter_by(goal_id=goal.id).count() == 1


def test_contribution_cannot_reference_deleted_goal(session):
    goal = GoalService.create(session, {"title": "Bike", "target_amount": 200})
    goal_id = goal.id
    GoalService.delete(session, goal_id)

    session.add(Contribution(goal_id=goal_id, amount=10))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()
