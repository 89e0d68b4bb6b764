from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Any

class SessionUser(BaseModel):
    """세션 토큰에 담기는 최소 사용자 정보"""
    model_config = ConfigDict(frozen=True)

    id: int
    username: str

class GoogleLoginRequest(BaseModel):
    token: str = Field(min_length=1)

class GoogleLoginResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"

class GoogleTokenInfo(BaseModel):
    """Google tokeninfo 응답 중 사용하는 필드"""
    email: str
    email_verified: str = "false"
    given_name: str = ""
    family_name: Optional[str] = None
    picture: Optional[str] = None

    @field_validator("email_verified", mode="before")
    @classmethod
    def normalize_email_verified(cls, value: Any) -> str:
        # 문서상 "true"/"false" 문자열이지만 bool 로 오는 경우도 처리
        return str(value).lower()
