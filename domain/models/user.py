"""
User-related database models.
"""

from datetime import date

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    Text,
    TIMESTAMP,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """User account and body profile"""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False)
    nickname = Column(Text, nullable=False)
    password_hash = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text)
    gender = Column(Text)
    profile_image_url = Column(Text)
    weight = Column(Float)
    goal_weight = Column(Float)
    height = Column(Float)
    activity_level = Column(Text)
    daily_calorie_goal = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Constraint names are what the conflict mapping looks for
    __table_args__ = (
        UniqueConstraint("email", name="users_email_key"),
        UniqueConstraint("nickname", name="users_nickname_key"),
    )

    # Relationships
    weight_history = relationship(
        "WeightRecord", back_populates="user", cascade="all, delete-orphan"
    )
    plan_items = relationship(
        "CustomPlanItem", back_populates="user", cascade="all, delete-orphan"
    )
    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")


class WeightRecord(Base):
    """One weigh-in of a user"""

    __tablename__ = "weight_history"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    weight = Column(Float, nullable=False)
    recorded_at = Column(Date, nullable=False, default=date.today)

    user = relationship("User", back_populates="weight_history")
