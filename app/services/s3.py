import base64
import logging
import mimetypes
import uuid
from datetime import datetime
from typing import Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import UploadFailed

logger = logging.getLogger(__name__)

## S3 클라이언트 설정
s3_client = boto3.client(
    's3',
    aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
    aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
    region_name=settings.AWS_REGION
)

DATA_URL_PREFIX = "data:"
MAX_IMAGE_BYTES = 10 * 1024 * 1024  # 10MB


def decode_data_url(data_url: str) -> Tuple[bytes, str]:
    """
    data URL (예: "data:image/png;base64,....") 을 바이트와 콘텐츠 타입으로 분리합니다.
    """
    header, sep, encoded = data_url.partition(",")
    if not sep or not header.endswith(";base64"):
        raise ValueError("base64 data URL 형식이 아닙니다.")
    content_type = header[len(DATA_URL_PREFIX):-len(";base64")] or "application/octet-stream"
    # base64 는 4글자당 3바이트
    if len(encoded) // 4 * 3 > MAX_IMAGE_BYTES:
        raise ValueError("이미지 크기가 10MB를 초과합니다.")
    return base64.b64decode(encoded, validate=True), content_type


def build_image_key(content_type: str) -> str:
    """ 예: "pixfeed/images/20250101_120000_<uuid>.png" """
    extension = mimetypes.guess_extension(content_type) or ""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{settings.S3_IMAGE_PREFIX}/{timestamp}_{uuid.uuid4().hex}{extension}"


def upload_image(img_url: str) -> str:
    """
    게시물 이미지를 S3에 업로드하고 공개 URL을 반환합니다.

    Args:
        img_url: base64 data URL (서버에서 외부 URL은 가져오지 않음)

    Raises:
        UploadFailed: 이미지 읽기/업로드 실패
    """
    try:
        if not img_url.startswith(DATA_URL_PREFIX):
            raise ValueError("base64 data URL 이미지만 업로드할 수 있습니다.")
        body, content_type = decode_data_url(img_url)

        if not content_type.startswith("image/"):
            raise ValueError(f"이미지 파일이 아닙니다: {content_type}")

        s3_key = build_image_key(content_type)
        s3_client.put_object(
            Bucket=settings.AWS_BUCKET_NAME,
            Key=s3_key,
            Body=body,
            ContentType=content_type
        )
    except (ValueError, BotoCoreError, ClientError) as e:
        logger.error(f"이미지 업로드 실패: {str(e)}")
        raise UploadFailed()

    logger.info(f"이미지 업로드 성공: {s3_key}")
    return settings.get_image_url(s3_key)
