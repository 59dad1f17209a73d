"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, violated_unique_column
from repositories.user_repository import UserRepository, WeightRepository
from repositories.food_repository import FoodRepository
from repositories.plan_repository import CustomPlanRepository, PremadePlanRepository
from repositories.community_repository import PostRepository, CommentRepository

__all__ = [
    "BaseRepository",
    "violated_unique_column",
    "UserRepository",
    "WeightRepository",
    "FoodRepository",
    "CustomPlanRepository",
    "PremadePlanRepository",
    "PostRepository",
    "CommentRepository",
]
