"""Translate API 라우트

업로드 이미지 한 장을 Detection → OCR → Translation 으로 동기 처리.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from src.config import get_settings
from src.constants import Language
from src.services import screen as screen_service
from src.services.detection import InvalidImageError
from src.services.pipeline import PipelineError
from src.services.translation import TranslationError
from src.services.upload import UploadError, read_upload_image

router = APIRouter(prefix="/translate", tags=["translate"])
logger = logging.getLogger(__name__)


@router.post("", response_model=screen_service.TranslateScreenResponse)
def translate_screen(
    file: Annotated[UploadFile, File()],
    source: Annotated[str | None, Form()] = None,
    target: Annotated[str | None, Form()] = None,
) -> screen_service.TranslateScreenResponse:
    """화면 이미지 번역 (언어 미지정 시 설정값 사용)"""
    settings = get_settings()
    source = source or settings.source_language
    target = target or settings.target_language

    for code in (source, target):
        if code not in Language.NAMES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "code": "UNSUPPORTED_LANGUAGE",
                    "message": f"지원하지 않는 언어 코드: {code}",
                },
            )

    try:
        image = read_upload_image(file)
    except UploadError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": e.code, "message": e.message},
        ) from None
    except InvalidImageError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "INVALID_IMAGE", "message": str(e)},
        ) from None

    try:
        return screen_service.translate_screen_response(image, source, target)
    except (PipelineError, TranslationError) as e:
        logger.error(f"화면 번역 실패: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": "UPSTREAM_FAILED", "message": str(e)},
        ) from None
