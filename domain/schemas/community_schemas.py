from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class PostResponse(BaseModel):
    post_id: int
    user_id: int
    category: str
    title: str
    content: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1)


class CommentResponse(BaseModel):
    comment_id: int
    post_id: int
    user_id: int
    text: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CommentView(BaseModel):
    """Comment as shown under a post in the feed"""

    comment_id: int
    text: str
    nickname: str
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None


class PostView(PostResponse):
    """Feed entry: post, author and its comments"""

    nickname: str
    profile_image_url: Optional[str] = None
    comments: List[CommentView] = []
