"""
Meal planning models: the user's own plan lines and the premade plans.
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class CustomPlanItem(Base):
    """A line of a user's own meal plan"""

    __tablename__ = "custom_plan_items"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    meal_type = Column(Text, nullable=False)  # breakfast, lunch, dinner, snack
    food_id = Column(Integer, ForeignKey("foods.food_id"), nullable=True)
    quantity = Column(Float, nullable=False, default=100)  # grams
    custom_food_name = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="plan_items")
    food = relationship("Food")


class PremadePlan(Base):
    """One of the fixed plans offered per goal"""

    __tablename__ = "premade_plans"

    plan_id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text)

    items = relationship(
        "PremadePlanItem",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="PremadePlanItem.meal_type",
    )


class PremadePlanItem(Base):
    __tablename__ = "premade_plan_items"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(
        Integer, ForeignKey("premade_plans.plan_id", ondelete="CASCADE"), nullable=False
    )
    meal_type = Column(Text, nullable=False)
    description = Column(Text)
    kcal = Column(Float)

    plan = relationship("PremadePlan", back_populates="items")
