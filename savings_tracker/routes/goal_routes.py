from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from savings_tracker.database import get_db
from savings_tracker.services.goal_service import GoalService

router = APIRouter(prefix="/api/goals", tags=["Goals"])


class GoalCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    target_amount: Optional[Any] = Field(None, alias="targetAmount")  # checked by validate_positive_amount
    image_url: Optional[str] = Field(None, alias="imageUrl")


class GoalUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    target_amount: Optional[Any] = Field(None, alias="targetAmount")
    image_url: Optional[str] = Field(None, alias="imageUrl")


class GoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    title: str
    target_amount: float = Field(serialization_alias="targetAmount")
    image_url: Optional[str] = Field(None, serialization_alias="imageUrl")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class MessageOut(BaseModel):
    message: str


@router.get("", response_model=list[GoalOut])
def list_goals(db: Session = Depends(get_db)):
    return GoalService.get_all(db)


@router.post("", response_model=GoalOut, status_code=201)
def create_goal(goal_data: GoalCreate, db: Session = Depends(get_db)):
    return GoalService.create(db, goal_data.model_dump(exclude_unset=True))


@router.get("/{goal_id}", response_model=GoalOut)
def get_goal(goal_id: str, db: Session = Depends(get_db)):
    return GoalService.get_by_id(db, goal_id)


@router.put("/{goal_id}", response_model=GoalOut)
def update_goal(goal_id: str, goal_data: GoalUpdate, db: Session = Depends(get_db)):
    return GoalService.update(db, goal_id, goal_data.model_dump(exclude_unset=True))


@router.delete("/{goal_id}", response_model=MessageOut)
def delete_goal(goal_id: str, db: Session = Depends(get_db)):
    GoalService.delete(db, goal_id)
    return {"message": "Goal and its contributions deleted"}
