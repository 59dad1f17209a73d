from typing import List
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import User, WeightRecord
from domain.schemas.profile_schemas import ProfileUpdateRequest
from repositories import UserRepository, WeightRepository

logger = logging.getLogger("nutriapp.profile")

USER_NOT_FOUND_MESSAGE = "User not found"


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def get_profile(db: Session, user_id: int) -> User:
        """Retrieve the user's profile"""
        user = UserRepository(db).get_by_id(user_id)
        if user is None:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)

        logger.info(f"profile_fetched user_id={user_id}")
        return user

    @staticmethod
    def update_profile(db: Session, user_id: int, data: ProfileUpdateRequest) -> User:
        """
        Partially update the profile. Fields not sent (or sent as null) keep
        their stored value. ``current_weight`` is stored in the weight column.
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_id(user_id)
        if user is None:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)

        fields = data.model_dump(exclude_none=True)
        if "current_weight" in fields:
            fields["weight"] = fields.pop("current_weight")

        user = user_repo.update_fields(user, **fields)
        logger.info(f"profile_updated user_id={user_id} fields={sorted(fields)}")
        return user

    @staticmethod
    def add_weight(db: Session, user_id: int, weight: float) -> WeightRecord:
        """Record today's weight"""
        record = WeightRepository(db).add(user_id, weight)
        logger.info(f"weight_recorded user_id={user_id} weight={weight}")
        return record

    @staticmethod
    def get_weight_history(db: Session, user_id: int, limit: int = 30) -> List[WeightRecord]:
        return WeightRepository(db).latest_for_user(user_id, limit=limit)
