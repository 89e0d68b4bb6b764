from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.core.config import settings
from app.models.like import Like
from app.models.post import Post
from app.schemas.auth import SessionUser
from app.schemas.post import FeedPostResponse


def get_feed_posts(db: Session, current_user: Optional[SessionUser]) -> Optional[List[FeedPostResponse]]:
    """
    최신 게시물 FEED_PAGE_SIZE 개를 좋아요 수, 내가 좋아요 눌렀는지와 함께 반환합니다.

    피드는 로그인한 사용자 전용이라 익명 요청이면 None.
    게시물 조회 1회 + 좋아요 수 1회 + 내 좋아요 1회, 총 3번의 쿼리로 처리합니다.
    작성자 정보는 포함하지 않으며 author_id 로 따로 조회합니다.
    """
    if current_user is None:
        return None

    posts = (
        db.query(Post)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .limit(settings.FEED_PAGE_SIZE)
        .all()
    )
    post_ids = [post.id for post in posts]
    if not post_ids:
        return []

    # 게시물별 전체 좋아요 수
    likes_count_by_post = dict(
        db.query(Like.post_id, func.count())
        .filter(Like.post_id.in_(post_ids))
        .group_by(Like.post_id)
        .all()
    )

    # 현재 사용자가 좋아요 누른 게시물
    liked_rows = (
        db.query(Like.post_id)
        .filter(Like.user_id == current_user.id, Like.post_id.in_(post_ids))
        .all()
    )
    liked_post_ids = {row.post_id for row in liked_rows}

    return [
        FeedPostResponse(
            id=post.id,
            content=post.content,
            img_url=post.img_url,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
            total_like_count=likes_count_by_post.get(post.id, 0),
            user_has_liked=post.id in liked_post_ids,
        )
        for post in posts
    ]
