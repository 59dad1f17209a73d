"""
Plan Repository - custom plan lines and premade plans
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from domain.models import CustomPlanItem, Food, PremadePlan
from repositories.base import BaseRepository


class CustomPlanRepository(BaseRepository[CustomPlanItem]):
    """Repository for a user's own plan lines"""

    def __init__(self, db: Session):
        super().__init__(db, CustomPlanItem)

    def list_with_food(self, user_id: int) -> List[Tuple[CustomPlanItem, Optional[Food]]]:
        """User's lines joined to their food (None for free-text lines)"""
        return (
            self.db.query(CustomPlanItem, Food)
            .outerjoin(Food, CustomPlanItem.food_id == Food.food_id)
            .filter(CustomPlanItem.user_id == user_id)
            .order_by(
                CustomPlanItem.meal_type,
                CustomPlanItem.created_at,
                CustomPlanItem.item_id,
            )
            .all()
        )

    def delete_owned(self, item_id: int, user_id: int) -> int:
        """Delete a line only if it belongs to user_id; returns affected rows"""
        count = (
            self.db.query(CustomPlanItem)
            .filter(CustomPlanItem.item_id == item_id, CustomPlanItem.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count


class PremadePlanRepository(BaseRepository[PremadePlan]):
    """Repository for the fixed per-goal plans"""

    def __init__(self, db: Session):
        super().__init__(db, PremadePlan)

    def get_with_items(self, plan_id: int) -> Optional[PremadePlan]:
        return (
            self.db.query(PremadePlan)
            .options(selectinload(PremadePlan.items))
            .filter(PremadePlan.plan_id == plan_id)
            .first()
        )
