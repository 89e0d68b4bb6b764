from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.api import auth, users, posts
from app.core.exceptions import PixfeedError
import logging
from contextlib import asynccontextmanager

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 데이터베이스 연결 정보 출력 함수
def log_database_info():
    try:
        from app.db.base import engine
        from sqlalchemy import inspect

        logger.info("=" * 60)
        logger.info("PIXFEED API 서버 시작")
        logger.info(f"DATABASE: {engine.url.render_as_string(hide_password=True)}")

        # 테이블 목록 확인
        table_names = inspect(engine).get_table_names()
        logger.info(f"테이블 개수: {len(table_names)} ({', '.join(table_names)})")
        logger.info("=" * 60)

    except Exception as e:
        logger.error(f"데이터베이스 연결 확인 중 오류 발생: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 서버 시작 시 실행
    log_database_info()
    yield

app = FastAPI(
    title="Pixfeed API",
    description="Pixfeed API 서비스",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 실제 운영 환경에서는 특정 도메인만 허용하도록 설정
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 도메인 예외 -> HTTP 응답 (HTTPException 과 같은 {"detail": ...} 형태)
@app.exception_handler(PixfeedError)
async def pixfeed_error_handler(request: Request, exc: PixfeedError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

# 라우터 등록
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(posts.router, prefix="/api/posts", tags=["posts"])

@app.get("/")
async def root():
    return {"message": "Welcome to Pixfeed API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
