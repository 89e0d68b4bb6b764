"""
세션 토큰(JWT) 발급/검증.

서명 키, 알고리즘, 만료 시간은 생성 시점에 주입되며 이후 바뀌지 않는다.
프로세스 전체에서는 settings 로부터 한 번 만든 token_codec 을 사용한다.
"""
import logging
from datetime import datetime, timedelta, timezone

import jwt
from jwt import ExpiredSignatureError, InvalidTokenError  # PyJWT 전용 예외
from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import InvalidToken
from app.schemas.auth import SessionUser

logger = logging.getLogger(__name__)


class TokenCodec:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(days=7)):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, config) -> "TokenCodec":
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expires_in=timedelta(seconds=config.ACCESS_TOKEN_EXPIRE_SECONDS),
        )

    def issue(self, user: SessionUser) -> str:
        """사용자 id/username 과 iat/exp 를 담은 토큰 생성"""
        now = datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "username": user.username,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> SessionUser:
        """
        서명과 만료를 확인하고 토큰에 담긴 사용자 정보를 반환.
        실패 시 InvalidToken 발생.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except InvalidTokenError as e:
            raise InvalidToken(f"Invalid token: {e}")

        try:
            return SessionUser(id=payload["id"], username=payload["username"])
        except (KeyError, ValidationError):
            raise InvalidToken("Token payload does not contain a valid user")


token_codec = TokenCodec.from_settings(settings)
