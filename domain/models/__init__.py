"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    SessionLocal,
    init_engine,
    get_engine,
    init_database,
    dispose_engine,
    get_db_session,
)
from domain.models.user import User, WeightRecord
from domain.models.food import Food
from domain.models.meal_plan import CustomPlanItem, PremadePlan, PremadePlanItem
from domain.models.community import Post, Comment

__all__ = [
    # Database
    "Base",
    "SessionLocal",
    "init_engine",
    "get_engine",
    "init_database",
    "dispose_engine",
    "get_db_session",
    # User models
    "User",
    "WeightRecord",
    # Food models
    "Food",
    # Meal plan models
    "CustomPlanItem",
    "PremadePlan",
    "PremadePlanItem",
    # Community models
    "Post",
    "Comment",
]
