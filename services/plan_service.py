from typing import List
import logging

from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, NotFoundError
from core.nutrition import DEFAULT_QUANTITY
from domain.mappers import PlanMapper
from domain.models import CustomPlanItem, PremadePlan
from domain.schemas.plan_schemas import CustomPlanItemCreate, CustomPlanItemView
from repositories import CustomPlanRepository, FoodRepository, PremadePlanRepository
from services.food_service import parse_goal

logger = logging.getLogger("nutriapp.plans")

ITEM_DELETE_FORBIDDEN_MESSAGE = "Not authorized to delete this item or it does not exist."


class PlanService:
    """Custom plan lines and premade plans"""

    @staticmethod
    def list_custom_items(db: Session, user_id: int) -> List[CustomPlanItemView]:
        """The user's lines with nutrition scaled to each quantity"""
        rows = CustomPlanRepository(db).list_with_food(user_id)
        return [PlanMapper.to_view(item, food) for item, food in rows]

    @staticmethod
    def add_custom_item(db: Session, user_id: int, data: CustomPlanItemCreate) -> CustomPlanItem:
        if data.food_id is not None and not FoodRepository(db).exists(data.food_id):
            raise NotFoundError("Food not found")

        item = CustomPlanRepository(db).create(
            CustomPlanItem(
                user_id=user_id,
                meal_type=data.meal_type,
                food_id=data.food_id,
                quantity=data.quantity or DEFAULT_QUANTITY,
                custom_food_name=data.custom_food_name,
            )
        )
        logger.info(f"plan_item_added user_id={user_id} item_id={item.item_id}")
        return item

    @staticmethod
    def delete_custom_item(db: Session, user_id: int, item_id: int) -> None:
        """Delete one of the caller's lines.

        Zero affected rows (missing item or another user's item) raises
        ForbiddenError without telling the two cases apart.
        """
        count = CustomPlanRepository(db).delete_owned(item_id, user_id)
        if count == 0:
            logger.warning(f"plan_item_delete_denied user_id={user_id} item_id={item_id}")
            raise ForbiddenError(ITEM_DELETE_FORBIDDEN_MESSAGE)
        logger.info(f"plan_item_deleted user_id={user_id} item_id={item_id}")

    @staticmethod
    def get_premade_plan(db: Session, plan_type: str) -> PremadePlan:
        goal = parse_goal(plan_type)
        plan = PremadePlanRepository(db).get_with_items(goal.premade_plan_id)
        if plan is None:
            raise NotFoundError("Plan not found.")
        return plan
