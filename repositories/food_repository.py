"""
Food Repository - read-only access to the food reference table
"""

from typing import List, Optional, Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from domain.models import Food
from repositories.base import BaseRepository


class FoodRepository(BaseRepository[Food]):
    """Repository for food reference data"""

    def __init__(self, db: Session):
        super().__init__(db, Food)

    def search(self, term: str, limit: int = 20) -> List[Food]:
        """Foods whose name or category contains the term, case-insensitive"""
        pattern = f"%{term}%"
        return (
            self.db.query(Food)
            .filter(or_(Food.name.ilike(pattern), Food.category.ilike(pattern)))
            .order_by(Food.food_id)
            .limit(limit)
            .all()
        )

    def get_by_names(self, names: Sequence[str]) -> List[Food]:
        return (
            self.db.query(Food)
            .filter(Food.name.in_(list(names)))
            .order_by(Food.food_id)
            .all()
        )

    def viability_for(self, column: str, term: str) -> List[tuple]:
        """(food_id, name, rating) for matching foods rated for the goal column"""
        rating = getattr(Food, column)
        return (
            self.db.query(Food.food_id, Food.name, rating)
            .filter(Food.name.ilike(f"%{term}%"), rating.isnot(None))
            .order_by(Food.food_id)
            .all()
        )

    def random_with_image(self) -> Optional[Food]:
        """One food drawn uniformly among those with a non-empty image"""
        return (
            self.db.query(Food)
            .filter(Food.image_url.isnot(None), Food.image_url != "")
            .order_by(func.random())
            .limit(1)
            .first()
        )
