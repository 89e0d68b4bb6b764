import logging

import httpx

from app.core.config import settings
from app.schemas.auth import GoogleTokenInfo

logger = logging.getLogger(__name__)


def fetch_google_token_info(id_token: str) -> GoogleTokenInfo:
    """
    Google tokeninfo 엔드포인트로 ID 토큰을 검증하고 사용자 정보를 반환합니다.

    Raises:
        httpx.HTTPError: 요청 실패 또는 4xx/5xx 응답 (잘못된 토큰 포함)
        pydantic.ValidationError: 응답에 email 이 없는 경우
    """
    response = httpx.get(
        settings.GOOGLE_TOKENINFO_URL,
        params={"id_token": id_token},
        timeout=settings.GOOGLE_TIMEOUT_SECONDS,
    )
    response.raise_for_status()
    token_info = GoogleTokenInfo.model_validate(response.json())
    logger.info(f"Google 토큰 검증 완료: {token_info.email}")
    return token_info
