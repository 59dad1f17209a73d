"""Premade plans (public) and the caller's custom plan (protected)"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_current_claims, get_db
from core.security import TokenClaims
from domain.schemas.plan_schemas import (
    CustomPlanItemCreate,
    CustomPlanItemResponse,
    CustomPlanItemView,
    MessageResponse,
    PremadePlanResponse,
)
from services.plan_service import PlanService

router = APIRouter(prefix="/plans", tags=["Meal Planning"])
logger = logging.getLogger("nutriapp.api.plans")


@router.get("/premade/{plan_type}", response_model=PremadePlanResponse)
def get_premade_plan(plan_type: str, db: Session = Depends(get_db)):
    """plan_type is weightLoss, muscleGain or maintenance; items come ordered by meal type."""
    plan = PlanService.get_premade_plan(db, plan_type)
    return PremadePlanResponse.model_validate(plan)


@router.get(
    "/custom",
    response_model=List[CustomPlanItemView],
    response_model_exclude_unset=True,
)
def list_custom_items(
    claims: TokenClaims = Depends(get_current_claims), db: Session = Depends(get_db)
):
    """
    The caller's plan lines ordered by meal type and creation time.

    Lines referencing a food include ``calories``, ``protein``, ``carbs`` and
    ``fats`` scaled to the line's quantity in grams.
    """
    return PlanService.list_custom_items(db, claims.user_id)


@router.post(
    "/custom",
    response_model=CustomPlanItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_custom_item(
    body: CustomPlanItemCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    item = PlanService.add_custom_item(db, claims.user_id, body)
    return CustomPlanItemResponse.model_validate(item)


@router.delete("/custom/{item_id}", response_model=MessageResponse)
def delete_custom_item(
    item_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Only the owner can delete; anything else is 403."""
    PlanService.delete_custom_item(db, claims.user_id, item_id)
    return MessageResponse(message="Item deleted successfully")
