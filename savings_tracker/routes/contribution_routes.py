from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from savings_tracker.database import get_db
from savings_tracker.routes.goal_routes import MessageOut
from savings_tracker.services.contribution_service import ContributionService
from savings_tracker.services.progress_service import Progress, ProgressService

router = APIRouter(prefix="/api/contributions", tags=["Contributions"])


class ContributionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    goal_id: Optional[str] = Field(None, alias="goalId")
    amount: Optional[Any] = None  # checked by validate_positive_amount
    note: Optional[str] = None
    date: Optional[datetime] = None


class ContributionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    goal_id: str = Field(serialization_alias="goalId")
    amount: float
    note: Optional[str] = None
    date: datetime


class ProgressView(BaseModel):
    """Field names kept as the existing clients read them."""

    model_config = ConfigDict(populate_by_name=True)

    goal_id: str = Field(alias="goalId")
    titulo: str
    total_aportado: float = Field(alias="totalAportado")
    monto_objetivo: float = Field(alias="montoObjetivo")
    porcentaje_avance: str = Field(alias="porcentajeAvance")  # e.g. "42.50"

    @classmethod
    def from_progress(cls, progress: Progress) -> "ProgressView":
        return cls(
            goal_id=progress.goal_id,
            titulo=progress.title,
            total_aportado=progress.total_contributed,
            monto_objetivo=progress.target_amount,
            porcentaje_avance=f"{progress.percent_complete:.2f}",
        )


@router.post("", response_model=ContributionOut, status_code=201)
def create_contribution(data: ContributionCreate, db: Session = Depends(get_db)):
    return ContributionService.create(db, data.model_dump(exclude_unset=True))


@router.get("/goal/{goal_id}", response_model=list[ContributionOut])
def list_contributions(goal_id: str, db: Session = Depends(get_db)):
    return ContributionService.list_by_goal(db, goal_id)


@router.get("/progress/{goal_id}", response_model=ProgressView)
def goal_progress(goal_id: str, db: Session = Depends(get_db)):
    return ProgressView.from_progress(ProgressService.get_progress(db, goal_id))


@router.delete("/{contribution_id}", response_model=MessageOut)
def delete_contribution(contribution_id: str, db: Session = Depends(get_db)):
    ContributionService.delete(db, contribution_id)
    return {"message": "Contribution deleted"}
