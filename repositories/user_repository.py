"""
User Repository - Data access layer for accounts, profiles and weight history
"""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError
from domain.models import User, WeightRecord
from repositories.base import BaseRepository, violated_unique_column

EMAIL_TAKEN_MESSAGE = "Email is already registered."
NICKNAME_TAKEN_MESSAGE = "Nickname is already in use."
UNIQUE_FIELD_MESSAGES = {
    "email": EMAIL_TAKEN_MESSAGE,
    "nickname": NICKNAME_TAKEN_MESSAGE,
}


def conflict_from_integrity_error(error: IntegrityError) -> Optional[ConflictError]:
    """Translate a unique violation on email/nickname into a ConflictError"""
    column = violated_unique_column(error, list(UNIQUE_FIELD_MESSAGES))
    if column is None:
        return None
    return ConflictError(UNIQUE_FIELD_MESSAGES[column], field=column)


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_login_identifier(self, identifier: str) -> Optional[User]:
        """Get user by email or nickname"""
        return (
            self.db.query(User)
            .filter(or_(User.email == identifier, User.nickname == identifier))
            .first()
        )

    def create_user(self, **fields) -> User:
        """Insert a new user; duplicate email/nickname raises ConflictError"""
        user = User(**fields)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError as e:
            self.db.rollback()
            conflict = conflict_from_integrity_error(e)
            if conflict is not None:
                raise conflict from e
            raise

    def update_fields(self, user: User, **fields) -> User:
        """Apply the given non-None fields; absent values keep the stored ones"""
        for key, value in fields.items():
            if value is not None and hasattr(user, key):
                setattr(user, key, value)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            conflict = conflict_from_integrity_error(e)
            if conflict is not None:
                raise conflict from e
            raise
        self.db.refresh(user)
        return user


class WeightRepository(BaseRepository[WeightRecord]):
    """Repository for weight history"""

    def __init__(self, db: Session):
        super().__init__(db, WeightRecord)

    def add(self, user_id: int, weight: float) -> WeightRecord:
        return self.create(WeightRecord(user_id=user_id, weight=weight))

    def latest_for_user(self, user_id: int, limit: int = 30) -> List[WeightRecord]:
        """Most recent weigh-ins first"""
        return (
            self.db.query(WeightRecord)
            .filter(WeightRecord.user_id == user_id)
            .order_by(WeightRecord.recorded_at.desc(), WeightRecord.record_id.desc())
            .limit(limit)
            .all()
        )
