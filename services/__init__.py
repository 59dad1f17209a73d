"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.profile_service import ProfileService
from services.food_service import FoodService
from services.food_of_the_day_service import FoodOfTheDayService
from services.plan_service import PlanService
from services.community_service import CommunityService

__all__ = [
    "AuthService",
    "ProfileService",
    "FoodService",
    "FoodOfTheDayService",
    "PlanService",
    "CommunityService",
]
