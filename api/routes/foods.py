"""Food lookup routes (public) and food of the day (protected)"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_current_claims, get_db
from core.security import TokenClaims
from domain.schemas.food_schemas import (
    FoodOfTheDayResponse,
    FoodResponse,
    ViabilityResponse,
)
from services.food_of_the_day_service import FoodOfTheDayService
from services.food_service import FoodService

router = APIRouter(tags=["Foods"])
logger = logging.getLogger("nutriapp.api.foods")


@router.get("/search", response_model=List[FoodResponse])
def search_foods(
    q: Optional[str] = Query(None, description="Part of a food name or category"),
    db: Session = Depends(get_db),
):
    foods = FoodService.search(db, q)
    return [FoodResponse.model_validate(f) for f in foods]


@router.get("/foods/{food_id}", response_model=FoodResponse)
def get_food(food_id: int, db: Session = Depends(get_db)):
    return FoodResponse.model_validate(FoodService.get_food(db, food_id))


@router.get("/suggestions/seasonal", response_model=List[FoodResponse])
def seasonal_suggestions(db: Session = Depends(get_db)):
    foods = FoodService.seasonal_suggestions(db)
    return [FoodResponse.model_validate(f) for f in foods]


@router.get("/viability", response_model=List[ViabilityResponse])
def viability(
    goal: Optional[str] = Query(None, description="weightLoss, muscleGain or maintenance"),
    q: Optional[str] = Query(None, description="Part of a food name"),
    db: Session = Depends(get_db),
):
    return FoodService.viability(db, goal, q)


@router.get("/food-of-the-day", response_model=FoodOfTheDayResponse)
def food_of_the_day(
    claims: TokenClaims = Depends(get_current_claims), db: Session = Depends(get_db)
):
    """Random featured food with a reason tailored to the caller's weight goal. Never fails."""
    return FoodOfTheDayService.select(db, claims.user_id)
