"""
게시물 좋아요 토글.

먼저 좋아요 삭제를 시도하고, 삭제된 행이 없을 때만 생성한다.
조회 후 분기하지 않고 likes 테이블의 복합 기본 키를 기준으로 상태를 결정하므로
동시에 같은 (user_id, post_id) 로 토글이 들어와도 중복 행은 생기지 않는다.
"""
import logging
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ToggleFailed, Unauthenticated
from app.models.like import Like

logger = logging.getLogger(__name__)

MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"


def is_duplicate_key_error(error: IntegrityError) -> bool:
    """IntegrityError 가 유니크/기본 키 충돌인지 확인 (외래키 위반 등과 구분)"""
    orig = error.orig
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    if getattr(orig, "pgcode", None) == POSTGRES_UNIQUE_VIOLATION:
        return True
    message = str(orig)
    return "UNIQUE constraint failed" in message or "Duplicate entry" in message


def delete_like(db: Session, user_id: int, post_id: int) -> bool:
    """좋아요 삭제 후 커밋. 삭제된 행이 있으면 True"""
    result = db.execute(
        delete(Like).where(Like.user_id == user_id, Like.post_id == post_id)
    )
    deleted = result.rowcount > 0
    db.commit()
    return deleted


def create_like(db: Session, user_id: int, post_id: int) -> None:
    db.add(Like(user_id=user_id, post_id=post_id))
    db.commit()


def toggle_like(db: Session, user_id: Optional[int], post_id: int) -> bool:
    """
    좋아요 상태를 뒤집고 새 상태를 반환합니다. (True: 좋아요, False: 좋아요 취소)

    - 로그인하지 않은 경우 Unauthenticated
    - 삭제할 좋아요가 없으면 생성, 생성 중 기본 키 충돌은 이미 좋아요 상태로 처리
    - 그 외 DB 오류 (게시물/사용자 없음 포함) 는 ToggleFailed
    """
    if user_id is None:
        raise Unauthenticated()

    try:
        if delete_like(db, user_id, post_id):
            logger.info(f"좋아요 취소: user {user_id}, post {post_id}")
            return False
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"좋아요 삭제 중 오류 발생: user {user_id}, post {post_id}, {str(e)}")
        raise ToggleFailed()

    try:
        create_like(db, user_id, post_id)
    except IntegrityError as e:
        db.rollback()
        if is_duplicate_key_error(e):
            # 삭제와 생성 사이에 다른 요청이 먼저 좋아요를 생성함
            logger.info(f"동시 좋아요 요청 충돌, 좋아요 상태로 처리: user {user_id}, post {post_id}")
            return True
        logger.error(f"좋아요 생성 중 제약 조건 위반: user {user_id}, post {post_id}, {str(e)}")
        raise ToggleFailed()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"좋아요 생성 중 오류 발생: user {user_id}, post {post_id}, {str(e)}")
        raise ToggleFailed()

    logger.info(f"좋아요 추가: user {user_id}, post {post_id}")
    return True
