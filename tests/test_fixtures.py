"""
Shared test fixtures and utilities for the NutriApp test suite.

This module contains factories for users, foods, plan lines and posts plus token
helpers, reused across multiple test files to keep them consistent.
"""

import uuid
from datetime import datetime, timedelta, timezone

from core.security import hash_password, issue_token
from domain.models import CustomPlanItem, Food, Post, User

# Meets every password rule
STRONG_PASSWORD = "Abcdef1!"

# Hashing is slow; reuse one hash for factory-made users
_STRONG_PASSWORD_HASH = None


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def unique_nickname(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def make_user(db, weight=None, goal_weight=None, **overrides) -> User:
    """
    Insert a user with realistic defaults.

    The password is always STRONG_PASSWORD unless ``password_hash`` is given.
    """
    global _STRONG_PASSWORD_HASH
    if _STRONG_PASSWORD_HASH is None:
        _STRONG_PASSWORD_HASH = hash_password(STRONG_PASSWORD)

    fields = dict(
        email=unique_email("sofia.rojas"),
        nickname=unique_nickname("sofi"),
        password_hash=_STRONG_PASSWORD_HASH,
        first_name="Sofia",
        last_name="Rojas",
        phone="+56 9 1234 5678",
        gender="female",
        weight=weight,
        goal_weight=goal_weight,
    )
    fields.update(overrides)
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_food(db, **overrides) -> Food:
    """Insert a food; defaults describe cooked chicken breast per 100 g"""
    fields = dict(
        name="Pechuga de pollo",
        description="100 g grilled chicken breast",
        category="Carnes",
        kcal=165,
        protein=31,
        carbs=0,
        fats=3.6,
        image_url="https://example.com/img/pollo.jpg",
        viability_weight_loss="good",
        viability_muscle_gain="good",
        viability_maintenance="good",
    )
    fields.update(overrides)
    food = Food(**fields)
    db.add(food)
    db.commit()
    db.refresh(food)
    return food


def make_plan_item(db, user, food=None, **overrides) -> CustomPlanItem:
    fields = dict(
        user_id=user.user_id,
        meal_type="lunch",
        food_id=food.food_id if food is not None else None,
        quantity=100,
    )
    fields.update(overrides)
    item = CustomPlanItem(**fields)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def make_post(db, user, **overrides) -> Post:
    fields = dict(
        user_id=user.user_id,
        category="recipes",
        title="Cazuela liviana",
        content="Swap the potatoes for pumpkin and keep the broth.",
    )
    fields.update(overrides)
    post = Post(**fields)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def auth_headers(user: User) -> dict:
    token = issue_token(user.user_id, user.email, user.nickname)
    return {"Authorization": f"Bearer {token}"}


def expired_token(user: User) -> str:
    issued = datetime.now(timezone.utc) - timedelta(hours=25)
    return issue_token(user.user_id, user.email, user.nickname, now=issued)
