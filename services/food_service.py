"""
Food lookup: search, detail, seasonal suggestions and goal viability.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import Goal
from domain.models import Food
from repositories import FoodRepository

logger = logging.getLogger("nutriapp.foods")

SEASONAL_SUGGESTIONS = (
    "Mote con Huesillo",
    "Cazuela de Vacuno",
    "Sopaipillas (Fritas)",
)

SEARCH_LIMIT = 20


def parse_goal(value: str) -> Goal:
    try:
        return Goal(value)
    except ValueError:
        raise ServiceValidationError(
            "Invalid goal.", details={"allowed": [g.value for g in Goal]}
        )


class FoodService:
    """Read-only operations on the food reference table"""

    @staticmethod
    def search(db: Session, term: str) -> List[Food]:
        if not term or not term.strip():
            raise ServiceValidationError("A search term is required.")
        results = FoodRepository(db).search(term.strip(), limit=SEARCH_LIMIT)
        logger.info(f"food_search term={term!r} results={len(results)}")
        return results

    @staticmethod
    def get_food(db: Session, food_id: int) -> Food:
        food = FoodRepository(db).get_by_id(food_id)
        if food is None:
            raise NotFoundError("Food not found")
        return food

    @staticmethod
    def seasonal_suggestions(db: Session) -> List[Food]:
        return FoodRepository(db).get_by_names(SEASONAL_SUGGESTIONS)

    @staticmethod
    def viability(db: Session, goal: str, term: str) -> List[dict]:
        """Rating of matching foods for one goal"""
        if not goal or not term:
            raise ServiceValidationError('Missing "goal" and "q" parameters.')
        parsed = parse_goal(goal)
        rows = FoodRepository(db).viability_for(parsed.viability_column, term)
        return [
            {"food_id": food_id, "name": name, "viability": rating}
            for food_id, name, rating in rows
        ]
