import logging
from typing import Mapping, Optional

import httpx
from fastapi import Depends, Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import AuthError, InvalidToken, Unauthenticated
from app.crud.user import create_user, get_user, get_user_by_email
from app.models.user import User
from app.schemas.auth import SessionUser
from app.services.google import fetch_google_token_info
from app.services.token import token_codec

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_session_token(cookies: Mapping[str, str], headers: Mapping[str, str]) -> Optional[str]:
    """
    요청에서 세션 토큰을 꺼냅니다.
    세션 쿠키가 있으면 쿠키 값, 없으면 "Bearer " 로 시작하는 Authorization 헤더의 나머지.
    """
    cookie_token = cookies.get(settings.SESSION_COOKIE_NAME)
    # 빈 쿠키 값(로그아웃 등)은 쿠키가 없는 것으로 보고 헤더를 확인
    if cookie_token:
        return cookie_token

    authorization = headers.get("authorization") or headers.get("Authorization")
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):] or None
    return None


def resolve_session_user(cookies: Mapping[str, str], headers: Mapping[str, str]) -> Optional[SessionUser]:
    """ 토큰이 없거나 검증에 실패하면 None (익명 요청으로 처리) """
    token = extract_session_token(cookies, headers)
    if token is None:
        return None
    try:
        return token_codec.verify(token)
    except InvalidToken as e:
        # 공개 API 가 토큰 오류로 실패하지 않도록 익명으로 처리
        logger.info(f"세션 토큰 무시: {e.message}")
        return None


def get_optional_current_user(request: Request) -> Optional[SessionUser]:
    """ 현재 사용자 반환 (선택적 인증), 실패 시 None 반환 """
    return resolve_session_user(request.cookies, request.headers)


def get_current_user(current_user: Optional[SessionUser] = Depends(get_optional_current_user)) -> SessionUser:
    """ 현재 사용자 반환 (인증 필수) """
    if current_user is None:
        raise Unauthenticated()
    return current_user


def get_current_user_profile(db: Session, current_user: Optional[SessionUser]) -> Optional[User]:
    """로그인한 사용자의 DB 정보. 익명이거나 조회 실패 시 None"""
    if current_user is None:
        return None
    try:
        return get_user(db, current_user.id)
    except SQLAlchemyError as e:
        logger.error(f"현재 사용자 조회 중 오류 발생: {current_user.id}, {str(e)}")
        return None


def build_full_name(given_name: str, family_name: Optional[str]) -> str:
    return " ".join(filter(None, [given_name, family_name]))


def login_with_google(db: Session, id_token: str) -> str:
    """
    Google ID 토큰으로 로그인하고 세션 토큰을 반환합니다.

    1. Google tokeninfo 로 토큰 검증 (email_verified 가 "true" 가 아니면 거부)
    2. 이메일로 사용자 조회, 없으면 생성
    3. 사용자 id/username 으로 세션 토큰 발급
    """
    try:
        token_info = fetch_google_token_info(id_token)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Google 토큰 검증 실패: {str(e)}")
        raise AuthError()

    if token_info.email_verified != "true":
        logger.warning(f"Google 이메일 미인증 계정 로그인 시도: {token_info.email}")
        raise AuthError("Google 에서 인증되지 않은 이메일입니다.")

    try:
        user = get_user_by_email(db, token_info.email)
        if not user:
            user = _create_google_user(db, token_info)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Google 로그인 사용자 처리 중 오류 발생: {token_info.email}, {str(e)}")
        raise AuthError()

    logger.info(f"Google 로그인 성공: {user.id}")
    return token_codec.issue(SessionUser(id=user.id, username=user.username))


def _create_google_user(db: Session, token_info) -> User:
    try:
        user = create_user(
            db,
            email=token_info.email,
            username=token_info.email.split("@")[0],
            full_name=build_full_name(token_info.given_name, token_info.family_name),
            profile_image_url=token_info.picture,
        )
        logger.info(f"Google 신규 사용자 생성: {user.id}")
        return user
    except IntegrityError:
        # 같은 이메일로 동시에 첫 로그인한 경우 먼저 생성된 사용자를 사용
        db.rollback()
        user = get_user_by_email(db, token_info.email)
        if user is None:
            raise
        return user
