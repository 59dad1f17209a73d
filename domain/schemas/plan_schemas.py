from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CustomPlanItemCreate(BaseModel):
    """A new line for the caller's own plan; either food_id or custom_food_name names the food"""

    meal_type: str = Field(..., min_length=1, description="breakfast, lunch, dinner, snack")
    food_id: Optional[int] = None
    quantity: Optional[float] = Field(None, ge=0, description="Grams; absent or 0 means 100")
    custom_food_name: Optional[str] = None


class CustomPlanItemResponse(BaseModel):
    item_id: int
    user_id: int
    meal_type: str
    food_id: Optional[int] = None
    quantity: float
    custom_food_name: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CustomPlanItemView(CustomPlanItemResponse):
    """Plan line with the referenced food and its scaled nutrition.

    Nutrition keys are only present when the line references a known food.
    """

    food_name: Optional[str] = None
    base_kcal: Optional[float] = None
    base_protein: Optional[float] = None
    base_carbs: Optional[float] = None
    base_fats: Optional[float] = None
    calories: Optional[int] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None


class PremadePlanItemResponse(BaseModel):
    item_id: int
    plan_id: int
    meal_type: str
    description: Optional[str] = None
    kcal: Optional[float] = None

    model_config = {"from_attributes": True}


class PremadePlanResponse(BaseModel):
    plan_id: int
    name: str
    description: Optional[str] = None
    items: List[PremadePlanItemResponse] = []

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str
