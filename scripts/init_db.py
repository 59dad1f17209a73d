#!/usr/bin/env python3
"""
Initialize the NutriApp database
Creates the tables and seeds the three premade plans (idempotent)
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.config import settings
from domain.enums import Goal
from domain.models import PremadePlan, PremadePlanItem, SessionLocal, init_database, init_engine

logger = logging.getLogger("init_db")

PREMADE_PLANS = {
    Goal.WEIGHT_LOSS: {
        "name": "Weight loss plan",
        "description": "Calorie deficit with high-volume, low-energy foods.",
        "items": [
            ("breakfast", "Oatmeal with water and strawberries", 250),
            ("lunch", "Grilled chicken breast with mixed salad", 400),
            ("snack", "Natural yogurt", 90),
            ("dinner", "Chard omelette", 220),
        ],
    },
    Goal.MUSCLE_GAIN: {
        "name": "Muscle gain plan",
        "description": "Calorie surplus with protein in every meal.",
        "items": [
            ("breakfast", "Scrambled eggs with wholegrain toast", 550),
            ("lunch", "Beef stew with rice and beans", 800),
            ("snack", "Banana and peanut butter", 350),
            ("dinner", "Salmon with baked potatoes", 700),
        ],
    },
    Goal.MAINTENANCE: {
        "name": "Maintenance plan",
        "description": "Balanced meals at maintenance calories.",
        "items": [
            ("breakfast", "Wholegrain bread with avocado", 350),
            ("lunch", "Lentil stew with salad", 600),
            ("snack", "Apple and almonds", 200),
            ("dinner", "Vegetable soup with cheese", 450),
        ],
    },
}


def seed_premade_plans(db: Session) -> int:
    """Insert the premade plans that are missing; returns how many were added"""
    added = 0
    for goal, plan_data in PREMADE_PLANS.items():
        if db.get(PremadePlan, goal.premade_plan_id) is not None:
            continue
        plan = PremadePlan(
            plan_id=goal.premade_plan_id,
            name=plan_data["name"],
            description=plan_data["description"],
            items=[
                PremadePlanItem(meal_type=meal_type, description=description, kcal=kcal)
                for meal_type, description, kcal in plan_data["items"]
            ],
        )
        db.add(plan)
        added += 1
    db.commit()
    return added


def main() -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    try:
        engine = init_engine(settings.database_config(), echo=settings.db_echo)
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"Tables ready: {', '.join(sorted(tables))}")

        with SessionLocal() as db:
            added = seed_premade_plans(db)
        logger.info(f"Premade plans seeded: {added} added")
        return 0
    except Exception:
        logger.exception("Database initialization failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
