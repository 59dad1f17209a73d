from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, NotFoundError
from domain.mappers import CommunityMapper
from domain.models import Comment, Post
from domain.schemas.community_schemas import CommentCreate, PostCreate, PostView
from repositories import CommentRepository, PostRepository

logger = logging.getLogger("nutriapp.community")

POST_DELETE_FORBIDDEN_MESSAGE = "Not authorized to delete this post or the post does not exist."


class CommunityService:
    """Posts and comments"""

    @staticmethod
    def list_posts(db: Session, category: Optional[str] = None) -> List[PostView]:
        posts = PostRepository(db).list_feed(category)
        return [CommunityMapper.to_feed_entry(p) for p in posts]

    @staticmethod
    def create_post(db: Session, user_id: int, data: PostCreate) -> Post:
        post = PostRepository(db).create(
            Post(
                user_id=user_id,
                category=data.category,
                title=data.title,
                content=data.content,
            )
        )
        logger.info(f"post_created user_id={user_id} post_id={post.post_id}")
        return post

    @staticmethod
    def add_comment(db: Session, user_id: int, post_id: int, data: CommentCreate) -> Comment:
        if not PostRepository(db).exists(post_id):
            raise NotFoundError("Post not found")

        comment = CommentRepository(db).create(
            Comment(post_id=post_id, user_id=user_id, text=data.text)
        )
        logger.info(f"comment_added user_id={user_id} post_id={post_id}")
        return comment

    @staticmethod
    def delete_post(db: Session, user_id: int, post_id: int) -> None:
        count = PostRepository(db).delete_owned(post_id, user_id)
        if count == 0:
            logger.warning(f"post_delete_denied user_id={user_id} post_id={post_id}")
            raise ForbiddenError(POST_DELETE_FORBIDDEN_MESSAGE)
        logger.info(f"post_deleted user_id={user_id} post_id={post_id}")
