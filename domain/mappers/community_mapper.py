"""
Community mappers: feed entries with author and comments.
"""

from domain.models import Post
from domain.schemas.community_schemas import CommentView, PostView


class CommunityMapper:
    @staticmethod
    def to_feed_entry(post: Post) -> PostView:
        return PostView(
            post_id=post.post_id,
            user_id=post.user_id,
            category=post.category,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            nickname=post.author.nickname,
            profile_image_url=post.author.profile_image_url,
            comments=[
                CommentView(
                    comment_id=c.comment_id,
                    text=c.text,
                    nickname=c.author.nickname,
                    profile_image_url=c.author.profile_image_url,
                    created_at=c.created_at,
                )
                for c in post.comments
            ],
        )
