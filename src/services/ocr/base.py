"""OCR Protocol

교체 가능한 문자 인식 구현을 위한 인터페이스 정의.
"""

from typing import Protocol

import numpy as np

from src.schemas.pipeline import TextBlock


class OCRError(Exception):
    pass


class OCREngine(Protocol):
    """텍스트 인식 인터페이스

    구현체:
    - TesseractOCR: Tesseract (pytesseract)
    """

    def recognize(self, image: np.ndarray) -> list[TextBlock]:
        """이미지 전체에서 텍스트 블록 인식

        Args:
            image: RGB 이미지 (numpy 배열)

        Returns:
            list[TextBlock]: 입력 이미지 기준 좌표의 텍스트 블록

        Raises:
            OCRError: 인식 엔진 실패 시
        """
        ...
