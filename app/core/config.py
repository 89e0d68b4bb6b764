from pydantic_settings import BaseSettings
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Pixfeed API"
    VERSION: str = "1.0.0"

    # Database settings
    DB_USERNAME: str = ""
    DB_PASSWORD: str = ""
    DB_DATABASE: str = ""
    DB_HOST: str = "localhost"
    SQLALCHEMY_DATABASE_URL: Optional[str] = None  # 전체 URL 지정 시 DB_* 값보다 우선

    # JWT settings
    JWT_SECRET_KEY: str = "your-secret-key"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 60 * 60 * 24 * 7  # 7일

    # 세션 쿠키 (헤더보다 우선)
    SESSION_COOKIE_NAME: str = "__pixfeed_token"

    # Google settings
    GOOGLE_TOKENINFO_URL: str = "https://oauth2.googleapis.com/tokeninfo"
    GOOGLE_TIMEOUT_SECONDS: float = 5.0

    # AWS settings
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_REGION: str = "ap-northeast-2"
    AWS_BUCKET_NAME: str = ""

    # Media settings
    IMAGE_BASE_URL: str = ""  # CloudFront URL for images
    S3_IMAGE_PREFIX: str = "pixfeed/images"

    # Feed settings
    FEED_PAGE_SIZE: int = 5

    def get_image_url(self, s3_key: str) -> str:
        """업로드된 이미지의 공개 URL 생성"""
        return f"{self.IMAGE_BASE_URL}/{s3_key}"

    @property
    def DATABASE_URL(self) -> str:
        if self.SQLALCHEMY_DATABASE_URL:
            return self.SQLALCHEMY_DATABASE_URL
        return f"mysql+pymysql://{self.DB_USERNAME}:{self.DB_PASSWORD}@{self.DB_HOST}/{self.DB_DATABASE}"

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
