"""Community posts and comments (protected)"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_current_claims, get_db
from core.security import TokenClaims
from domain.schemas.community_schemas import (
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostResponse,
    PostView,
)
from domain.schemas.plan_schemas import MessageResponse
from services.community_service import CommunityService

router = APIRouter(prefix="/community", tags=["Community"])
logger = logging.getLogger("nutriapp.api.community")


@router.get("/posts", response_model=List[PostView])
def list_posts(
    category: Optional[str] = Query(None),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Newest first, each with its author and comments."""
    return CommunityService.list_posts(db, category)


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    body: PostCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    post = CommunityService.create_post(db, claims.user_id, body)
    return PostResponse.model_validate(post)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: int,
    body: CommentCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    comment = CommunityService.add_comment(db, claims.user_id, post_id, body)
    return CommentResponse.model_validate(comment)


@router.delete("/posts/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    CommunityService.delete_post(db, claims.user_id, post_id)
    return MessageResponse(message="Post deleted successfully")
