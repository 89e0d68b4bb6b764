import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistFailed, Unauthenticated
from app.models.post import Post
from app.schemas.auth import SessionUser
from app.schemas.post import PostCreate
from app.services.s3 import upload_image

logger = logging.getLogger(__name__)


def create_post(db: Session, current_user: Optional[SessionUser], payload: PostCreate) -> Post:
    """
    게시물 생성: 이미지를 S3에 올린 뒤 업로드된 URL로 게시물을 저장합니다.
    업로드 실패는 UploadFailed, 저장 실패는 PersistFailed.
    """
    if current_user is None:
        raise Unauthenticated()

    image_url = upload_image(payload.img_url)

    try:
        post = Post(
            content=payload.content,
            img_url=image_url,
            author_id=current_user.id
        )
        db.add(post)
        db.commit()
        db.refresh(post)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"게시물 저장 중 오류 발생: user {current_user.id}, {str(e)}")
        raise PersistFailed()

    logger.info(f"게시물 생성 완료: ID {post.id}, user {current_user.id}")
    return post
