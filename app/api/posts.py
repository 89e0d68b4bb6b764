from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.auth import SessionUser
from app.schemas.post import FeedPostResponse, LikeToggleResponse, PostCreate, PostResponse
from app.services.auth import get_current_user, get_optional_current_user
from app.services.feed import get_feed_posts
from app.services.like import toggle_like
from app.services.post import create_post

router = APIRouter()

@router.get("/feed", response_model=Optional[List[FeedPostResponse]])
def read_feed(
    db: Session = Depends(get_db),
    current_user: Optional[SessionUser] = Depends(get_optional_current_user)
):
    """
    최신 게시물 피드 (최대 5개).
    각 게시물에 전체 좋아요 수와 내가 좋아요 눌렀는지 포함, 로그인하지 않은 경우 null.
    """
    return get_feed_posts(db, current_user)

@router.post("/", response_model=PostResponse, status_code=201)
def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(get_current_user)
):
    """
    게시물 생성 API (이미지 S3 업로드 후 저장)
    """
    return create_post(db, current_user, payload)

@router.post("/{post_id}/like", response_model=LikeToggleResponse, summary="게시물 좋아요 토글")
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[SessionUser] = Depends(get_optional_current_user)
):
    """
    게시물 좋아요를 토글합니다.

    - 좋아요를 누르지 않은 게시물이면 좋아요를 추가하고 is_liked=true 를 반환합니다.
    - 이미 좋아요를 누른 게시물이면 좋아요를 취소하고 is_liked=false 를 반환합니다.
    """
    user_id = current_user.id if current_user else None
    is_liked = toggle_like(db, user_id, post_id)
    return LikeToggleResponse(
        is_liked=is_liked,
        message="게시물에 좋아요를 추가했습니다." if is_liked else "게시물 좋아요를 취소했습니다."
    )
