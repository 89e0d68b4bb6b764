from sqlalchemy import Column, Integer, DateTime, ForeignKey, PrimaryKeyConstraint
from sqlalchemy.sql import func
from app.db.base import Base

class Like(Base):
    __tablename__ = "likes"

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    post_id = Column(Integer, ForeignKey('posts.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # 복합 기본 키: (user_id, post_id) 조합당 좋아요는 하나만 존재
    __table_args__ = (PrimaryKeyConstraint('user_id', 'post_id'),)
