from typing import Optional
from sqlalchemy.orm import Session
from app.models.user import User

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, email: str, username: str, full_name: str, profile_image_url: Optional[str]) -> User:
    """
    Google 로그인으로 처음 들어온 사용자를 생성합니다.
    이메일은 Google 에서 인증된 것이므로 is_verified 는 항상 True.
    """
    user = User(
        email=email,
        username=username,
        full_name=full_name,
        profile_image_url=profile_image_url,
        is_verified=True
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
