from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from src.services import screen as screen_service
from src.services.detection import InvalidImageError
from src.services.detection.schemas import DetectionResponse
from src.services.upload import UploadError, read_upload_image

router = APIRouter(prefix="/detect", tags=["detect"])


@router.post("", response_model=DetectionResponse)
def detect_bubbles(file: Annotated[UploadFile, File()]) -> DetectionResponse:
    """말풍선 후보 영역 탐지 (동기 핸들러 → threadpool에서 실행)"""
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

    return screen_service.detect_screen(image)
