from typing import Optional

from pydantic import BaseModel


class FoodResponse(BaseModel):
    """Food reference record, nutrition per 100 g"""

    food_id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    kcal: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None
    image_url: Optional[str] = None
    viability_weight_loss: Optional[str] = None
    viability_muscle_gain: Optional[str] = None
    viability_maintenance: Optional[str] = None

    model_config = {"from_attributes": True}


class ViabilityResponse(BaseModel):
    food_id: int
    name: str
    viability: str


class FoodOfTheDayResponse(BaseModel):
    food: FoodResponse
    reason: str
