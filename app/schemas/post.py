from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

# 사용자 입력용 스키마
class PostCreate(BaseModel):
    content: Optional[str] = Field(default=None, max_length=1000)
    img_url: str = Field(min_length=1)  # base64 data URL (예: "data:image/png;base64,...")

# 게시물 응답 스키마
class PostResponse(BaseModel):
    id: int
    content: Optional[str] = None
    img_url: str
    author_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # SQLAlchemy ORM 객체를 바로 Pydantic 모델로 변환할 수 있게 해주는 설정
    model_config = {"from_attributes": True}

# 피드 게시물 응답 스키마 (좋아요 수 + 내가 좋아요 눌렀는지)
class FeedPostResponse(PostResponse):
    total_like_count: int = 0
    user_has_liked: bool = False

class LikeToggleResponse(BaseModel):
    is_liked: bool
    message: str
