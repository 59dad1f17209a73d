"""
Domain enums for NutriApp.
Contains the enumeration types shared by schemas and services.
"""

import enum


class Goal(str, enum.Enum):
    """Nutrition goals as spelled by the public API"""

    WEIGHT_LOSS = "weightLoss"
    MUSCLE_GAIN = "muscleGain"
    MAINTENANCE = "maintenance"

    @property
    def viability_column(self) -> str:
        return {
            Goal.WEIGHT_LOSS: "viability_weight_loss",
            Goal.MUSCLE_GAIN: "viability_muscle_gain",
            Goal.MAINTENANCE: "viability_maintenance",
        }[self]

    @property
    def premade_plan_id(self) -> int:
        return {
            Goal.WEIGHT_LOSS: 4,
            Goal.MUSCLE_GAIN: 5,
            Goal.MAINTENANCE: 6,
        }[self]


# Spellings of the top tier found in stored data
VERY_GOOD_SPELLINGS = frozenset({"very good", "very_good", "muy_bueno", "muy bueno"})


def is_very_good(value) -> bool:
    """True when a stored viability value is the top tier."""
    if value is None:
        return False
    return str(value).strip().lower() in VERY_GOOD_SPELLINGS
