"""
Pixfeed 도메인 예외.

모든 예외는 HTTP 상태 코드와 사용자에게 노출할 메시지를 가진다.
내부 오류 내용(SQL 오류, 외부 API 응답 등)은 로그에만 남기고 message 에는 넣지 않는다.
"""
from typing import Optional


class PixfeedError(Exception):
    """Pixfeed 예외의 기본 클래스"""

    status_code: int = 500
    default_message: str = "요청 처리 중 오류가 발생했습니다."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(PixfeedError):
    """인증이 필요한 작업에 유효한 사용자 정보가 없을 때"""

    status_code = 401
    default_message = "로그인이 필요합니다."


class InvalidToken(PixfeedError):
    """세션 토큰 서명/만료/형식 오류"""

    status_code = 401
    default_message = "Could not validate credentials"


class AuthError(PixfeedError):
    """Google 로그인 실패 (인증 거부, 이메일 미인증, 저장 실패)"""

    status_code = 401
    default_message = "Google 인증에 실패했습니다."


class ToggleFailed(PixfeedError):
    status_code = 500
    default_message = "좋아요 처리 중 오류가 발생했습니다."


class UploadFailed(PixfeedError):
    status_code = 500
    default_message = "게시물 작성에 실패했습니다. 다시 시도해주세요."


class PersistFailed(PixfeedError):
    status_code = 500
    default_message = "게시물 작성에 실패했습니다. 다시 시도해주세요."
