"""업로드 이미지 검증 및 디코딩"""

import numpy as np
from fastapi import UploadFile

from src.constants import Limits
from src.services.detection.image import ImageTooLargeError, decode_image

ALLOWED_TYPES = {"image/jpeg", "image/png", "image/webp"}


class UploadError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def read_upload_image(file: UploadFile) -> np.ndarray:
    """업로드 파일 → RGB numpy 배열

    Raises:
        UploadError: 파일 형식, 크기, 픽셀 수 위반 시
        InvalidImageError: 디코딩 실패 시
    """
    if file.content_type not in ALLOWED_TYPES:
        raise UploadError(
            "UNSUPPORTED_TYPE", f"지원하지 않는 파일 형식: {file.content_type or '알 수 없음'}"
        )

    data = file.file.read(Limits.MAX_UPLOAD_SIZE + 1)
    if len(data) > Limits.MAX_UPLOAD_SIZE:
        raise UploadError(
            "FILE_TOO_LARGE", f"파일 크기 초과 (최대 {Limits.MAX_UPLOAD_SIZE} bytes)"
        )

    try:
        return decode_image(data, max_pixels=Limits.MAX_PIXELS)
    except ImageTooLargeError as e:
        raise UploadError("IMAGE_TOO_LARGE", str(e)) from e
