from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    """User profile as returned to its owner; ``weight`` is exposed as ``current_weight``"""

    user_id: int
    email: str
    nickname: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    gender: Optional[str] = None
    profile_image_url: Optional[str] = None
    current_weight: Optional[float] = None
    goal_weight: Optional[float] = None
    height: Optional[float] = None
    activity_level: Optional[str] = None
    daily_calorie_goal: Optional[int] = None


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; fields left out keep their stored value"""

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    nickname: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    gender: Optional[str] = None
    profile_image_url: Optional[str] = None
    current_weight: Optional[float] = Field(None, gt=0)
    goal_weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    activity_level: Optional[str] = None
    daily_calorie_goal: Optional[int] = Field(None, gt=0)


class WeightRecordCreate(BaseModel):
    weight: float = Field(..., gt=0, description="Body weight in kg")


class WeightRecordResponse(BaseModel):
    record_id: int
    user_id: int
    weight: float
    recorded_at: date

    model_config = {"from_attributes": True}
