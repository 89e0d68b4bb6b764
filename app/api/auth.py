from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.base import get_db
from app.schemas.auth import GoogleLoginRequest, GoogleLoginResponse
from app.services.auth import login_with_google

router = APIRouter()

@router.post("/google", response_model=GoogleLoginResponse)
def login_google(request: GoogleLoginRequest, db: Session = Depends(get_db)):
    """
    Google 로그인 API

    - Google ID 토큰을 검증하고, 처음 로그인한 이메일이면 사용자를 생성합니다.
    - 세션 토큰을 반환합니다. (쿠키 또는 Authorization: Bearer 헤더로 사용)
    """
    access_token = login_with_google(db, request.token)
    return GoogleLoginResponse(
        message="로그인이 완료되었습니다.",
        access_token=access_token,
        token_type="bearer"
    )
