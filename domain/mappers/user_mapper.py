"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.profile_schemas import ProfileResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_profile(user: User) -> ProfileResponse:
        """The stored ``weight`` column is exposed as ``current_weight``."""
        return ProfileResponse(
            user_id=user.user_id,
            email=user.email,
            nickname=user.nickname,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            gender=user.gender,
            profile_image_url=user.profile_image_url,
            current_weight=user.weight,
            goal_weight=user.goal_weight,
            height=user.height,
            activity_level=user.activity_level,
            daily_calorie_goal=user.daily_calorie_goal,
        )
