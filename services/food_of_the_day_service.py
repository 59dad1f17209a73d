"""
Food of the day: a random food with an image plus a short rationale,
personalised with the caller's weight goal when it is known.

This endpoint is best-effort. Any failure degrades to a fixed fallback food
instead of an error.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from domain.enums import is_very_good
from domain.models import Food
from domain.schemas.food_schemas import FoodOfTheDayResponse, FoodResponse
from repositories import FoodRepository, UserRepository

logger = logging.getLogger("nutriapp.food_of_the_day")

FALLBACK_FOOD = {
    "food_id": 456,
    "name": "Acelga",
    "description": "1 taza (175g) de acelga cocida, sin sal.",
    "kcal": 35,
    "protein": 3.3,
    "carbs": 7,
    "fats": 0.1,
    "image_url": "https://imagenes2.eltiempo.com/files/image_1200_535/uploads/2023/05/09/645a9c00e1f42.jpeg",
    "category": "Verdura",
}
FALLBACK_REASON = (
    "Excellent for digestive health and rich in antioxidants. "
    "Low in calories and high in essential nutrients."
)

WEIGHT_LOSS_REASON = "Excellent for losing weight"
MUSCLE_GAIN_REASON = "Ideal for gaining muscle mass"
MAINTENANCE_REASON = "Perfect for maintenance"
LOW_CALORIE_REASON = "Low in calories, ideal for weight control"
HIGH_PROTEIN_REASON = "High in protein, excellent for muscles"
DEFAULT_REASON = "Nutritious and balanced food"

WEIGHT_LOSS_PREFIX = "Perfect for your weight-loss goal."
MUSCLE_GAIN_PREFIX = "Ideal for your muscle-gain goal."


def fallback() -> FoodOfTheDayResponse:
    return FoodOfTheDayResponse(food=FoodResponse(**FALLBACK_FOOD), reason=FALLBACK_REASON)


def benefit_reason(food: Food) -> str:
    """Base rationale; the first matching rule wins"""
    if is_very_good(food.viability_weight_loss):
        return WEIGHT_LOSS_REASON
    if is_very_good(food.viability_muscle_gain):
        return MUSCLE_GAIN_REASON
    if is_very_good(food.viability_maintenance):
        return MAINTENANCE_REASON
    if food.kcal is not None and food.kcal < 100:
        return LOW_CALORIE_REASON
    if food.protein is not None and food.protein > 15:
        return HIGH_PROTEIN_REASON
    return DEFAULT_REASON


def personalize_reason(
    reason: str, current_weight: Optional[float], goal_weight: Optional[float]
) -> str:
    """Prefix the rationale with the user's goal direction, if both weights are known"""
    if not current_weight or not goal_weight:
        return reason
    if goal_weight < current_weight:
        return f"{WEIGHT_LOSS_PREFIX} {reason}"
    if goal_weight > current_weight:
        return f"{MUSCLE_GAIN_PREFIX} {reason}"
    return reason


class FoodOfTheDayService:
    """Picks and explains the featured food"""

    @staticmethod
    def select(db: Session, user_id: Optional[int] = None) -> FoodOfTheDayResponse:
        try:
            food = FoodRepository(db).random_with_image()
            if food is None:
                logger.warning("food_of_the_day_fallback reason=no_eligible_food")
                return fallback()

            reason = benefit_reason(food)
            if user_id is not None:
                user = UserRepository(db).get_by_id(user_id)
                if user is not None:
                    reason = personalize_reason(reason, user.weight, user.goal_weight)

            logger.info(f"food_of_the_day food_id={food.food_id} user_id={user_id}")
            return FoodOfTheDayResponse(food=FoodResponse.model_validate(food), reason=reason)
        except Exception:
            logger.exception(f"food_of_the_day_fallback reason=error user_id={user_id}")
            return fallback()
