"""
Plan line mapper.
Joins a custom plan line with its food and attaches the scaled nutrition.
"""

from typing import Optional

from core.nutrition import scale_nutrition
from domain.models import CustomPlanItem, Food
from domain.schemas.plan_schemas import CustomPlanItemView


class PlanMapper:
    """Mapper for plan-related transformations."""

    @staticmethod
    def to_view(item: CustomPlanItem, food: Optional[Food]) -> CustomPlanItemView:
        """
        Convert a plan line and its (optional) food into the API view.

        Lines that reference a known food carry ``calories``, ``protein``,
        ``carbs`` and ``fats`` scaled to the line's quantity. Free-text lines
        carry no nutrition keys at all, so the route must serialize with
        ``exclude_unset``.
        """
        fields = {
            "item_id": item.item_id,
            "user_id": item.user_id,
            "meal_type": item.meal_type,
            "food_id": item.food_id,
            "quantity": item.quantity,
            "custom_food_name": item.custom_food_name,
            "created_at": item.created_at,
        }

        if food is not None:
            scaled = scale_nutrition(
                food.kcal, food.protein, food.carbs, food.fats, item.quantity
            )
            fields.update(
                food_name=food.name,
                base_kcal=food.kcal,
                base_protein=food.protein,
                base_carbs=food.carbs,
                base_fats=food.fats,
                calories=scaled.kcal,
                protein=scaled.protein,
                carbs=scaled.carbs,
                fats=scaled.fats,
            )

        return CustomPlanItemView(**fields)
