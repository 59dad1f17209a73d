"""Profile and weight history routes (protected)"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_current_claims, get_db
from core.security import TokenClaims
from domain.mappers import UserMapper
from domain.schemas.profile_schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    WeightRecordCreate,
    WeightRecordResponse,
)
from services.profile_service import ProfileService

router = APIRouter(tags=["Users"])
logger = logging.getLogger("nutriapp.api.users")


@router.get("/user/profile", response_model=ProfileResponse)
def get_profile(
    claims: TokenClaims = Depends(get_current_claims), db: Session = Depends(get_db)
):
    user = ProfileService.get_profile(db, claims.user_id)
    return UserMapper.to_profile(user)


@router.put("/user/profile", response_model=ProfileResponse)
def update_profile(
    body: ProfileUpdateRequest,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Partial update; omitted fields keep their value. A taken email or nickname gives 409."""
    user = ProfileService.update_profile(db, claims.user_id, body)
    return UserMapper.to_profile(user)


@router.post(
    "/weight/history",
    response_model=WeightRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_weight(
    body: WeightRecordCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    record = ProfileService.add_weight(db, claims.user_id, body.weight)
    return WeightRecordResponse.model_validate(record)


@router.get("/weight/history", response_model=List[WeightRecordResponse])
def get_weight_history(
    claims: TokenClaims = Depends(get_current_claims), db: Session = Depends(get_db)
):
    """Last 30 weigh-ins, newest first."""
    records = ProfileService.get_weight_history(db, claims.user_id)
    return [WeightRecordResponse.model_validate(r) for r in records]
