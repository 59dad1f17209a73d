"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
)
from domain.schemas.profile_schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    WeightRecordCreate,
    WeightRecordResponse,
)
from domain.schemas.food_schemas import (
    FoodResponse,
    ViabilityResponse,
    FoodOfTheDayResponse,
)
from domain.schemas.plan_schemas import (
    CustomPlanItemCreate,
    CustomPlanItemResponse,
    CustomPlanItemView,
    PremadePlanItemResponse,
    PremadePlanResponse,
    MessageResponse,
)
from domain.schemas.community_schemas import (
    PostCreate,
    PostResponse,
    PostView,
    CommentCreate,
    CommentResponse,
    CommentView,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    # Profile schemas
    "ProfileResponse",
    "ProfileUpdateRequest",
    "WeightRecordCreate",
    "WeightRecordResponse",
    # Food schemas
    "FoodResponse",
    "ViabilityResponse",
    "FoodOfTheDayResponse",
    # Plan schemas
    "CustomPlanItemCreate",
    "CustomPlanItemResponse",
    "CustomPlanItemView",
    "PremadePlanItemResponse",
    "PremadePlanResponse",
    "MessageResponse",
    # Community schemas
    "PostCreate",
    "PostResponse",
    "PostView",
    "CommentCreate",
    "CommentResponse",
    "CommentView",
]
