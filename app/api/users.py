from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.crud.user import get_user
from app.db.base import get_db
from app.schemas.auth import SessionUser
from app.schemas.user import PostAuthor, User as UserSchema
from app.services.auth import get_current_user_profile, get_optional_current_user

router = APIRouter()


@router.get("/me", response_model=Optional[UserSchema])
def read_current_user(
    db: Session = Depends(get_db),
    current_user: Optional[SessionUser] = Depends(get_optional_current_user)
):
    """
    현재 로그인한 사용자 정보. 로그인하지 않았거나 사용자가 없으면 null.
    """
    return get_current_user_profile(db, current_user)


@router.get("/{user_id}", response_model=PostAuthor)
def read_user(user_id: int, db: Session = Depends(get_db)):
    """
    사용자(게시물 작성자) 정보 조회. 피드의 author_id 로 호출합니다.
    """
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="사용자를 찾을 수 없습니다")
    return user
