from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class UserBase(BaseModel):
    username: str
    email: EmailStr
    full_name: str
    profile_image_url: Optional[str] = None
    # Pydantic v2: ORM 객체에서 속성으로 꺼내올 때 필요
    class Config:
        from_attributes = True

class User(UserBase):
    id: int
    is_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class PostAuthor(BaseModel):
    """게시물 작성자 정보 (피드에서 author_id 로 따로 조회)"""
    id: int
    username: str
    full_name: str
    profile_image_url: Optional[str] = None

    class Config:
        from_attributes = True
