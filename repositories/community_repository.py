"""
Community Repository - posts and comments
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from domain.models import Comment, Post
from repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for community posts"""

    def __init__(self, db: Session):
        super().__init__(db, Post)

    def list_feed(self, category: Optional[str] = None) -> List[Post]:
        """Posts newest first with author and comments (with their authors) loaded"""
        query = self.db.query(Post).options(
            joinedload(Post.author),
            selectinload(Post.comments).joinedload(Comment.author),
        )
        if category:
            query = query.filter(Post.category == category)
        return query.order_by(Post.created_at.desc(), Post.post_id.desc()).all()

    def delete_owned(self, post_id: int, user_id: int) -> int:
        """Delete a post only if it belongs to user_id; returns affected rows"""
        owned = select(Post.post_id).where(Post.post_id == post_id, Post.user_id == user_id)
        self.db.query(Comment).filter(Comment.post_id.in_(owned)).delete(
            synchronize_session=False
        )
        count = (
            self.db.query(Post)
            .filter(Post.post_id == post_id, Post.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count


class CommentRepository(BaseRepository[Comment]):
    """Repository for post comments"""

    def __init__(self, db: Session):
        super().__init__(db, Comment)
