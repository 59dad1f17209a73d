"""
Scaling of per-100 g nutrition values to the quantity of a plan line.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]

DEFAULT_QUANTITY = 100


@dataclass(frozen=True)
class ScaledNutrition:
    kcal: int
    protein: float
    carbs: float
    fats: float

    def to_dict(self) -> dict:
        return asdict(self)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); displayed
    values must round 2.5 up to 3.
    """
    return math.floor(value + 0.5)


def _as_float(value: Optional[Number]) -> float:
    return float(value) if value is not None else 0.0


def scale_nutrition(
    kcal: Optional[Number],
    protein: Optional[Number],
    carbs: Optional[Number],
    fats: Optional[Number],
    quantity: Optional[Number] = DEFAULT_QUANTITY,
) -> ScaledNutrition:
    """Scale base values (per 100 g) to ``quantity`` grams.

    kcal is rounded to an integer, macros to one decimal place. Absent base
    values count as zero.
    """
    grams = _as_float(quantity if quantity is not None else DEFAULT_QUANTITY)

    def scaled(value: Optional[Number]) -> float:
        return _as_float(value) * grams / 100

    def one_decimal(value: Optional[Number]) -> float:
        return round_half_up(scaled(value) * 10) / 10

    return ScaledNutrition(
        kcal=round_half_up(scaled(kcal)),
        protein=one_decimal(protein),
        carbs=one_decimal(carbs),
        fats=one_decimal(fats),
    )
