"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from abc import ABC
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None


def violated_unique_column(error: IntegrityError, candidates: List[str]) -> Optional[str]:
    """Name the column whose unique constraint an IntegrityError reports.

    PostgreSQL (psycopg2) exposes the constraint name, e.g. ``users_email_key``;
    other drivers only put it in the message (``UNIQUE constraint failed:
    users.email`` on SQLite). Returns None when no candidate matches.
    """
    orig = getattr(error, "orig", None)
    diag = getattr(orig, "diag", None)
    constraint = (getattr(diag, "constraint_name", None) or "").lower()
    if constraint:
        for column in candidates:
            if f"_{column}_key" in constraint:
                return column
        return None

    text = str(orig if orig is not None else error).lower()
    for column in candidates:
        if f".{column}" in text or f"({column})" in text or f"_{column}_key" in text:
            return column
    return None
