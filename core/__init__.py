"""
Core package - pure decision logic.
Password policy, token authority and nutrition scaling live here; none of it
touches the database.
"""

from core.password_policy import validate_password
from core.security import (
    TokenClaims,
    issue_token,
    verify_token,
    hash_password,
    verify_password,
)
from core.nutrition import ScaledNutrition, scale_nutrition

__all__ = [
    "validate_password",
    "TokenClaims",
    "issue_token",
    "verify_token",
    "hash_password",
    "verify_password",
    "ScaledNutrition",
    "scale_nutrition",
]
