"""OCR 공통 유틸리티 함수"""

import numpy as np

from src.schemas.pipeline import Rect, TextBlock
from src.services.ocr.base import OCREngine


def crop_region(image: np.ndarray, rect: Rect) -> np.ndarray:
    """rect 영역을 이미지 경계 내로 잘라냄

    완전히 경계 밖이면 빈 배열 반환.
    """
    h, w = image.shape[:2]
    x1 = min(w, max(0, rect.left))
    y1 = min(h, max(0, rect.top))
    x2 = min(w, max(0, rect.right))
    y2 = min(h, max(0, rect.bottom))
    return image[y1:y2, x1:x2]


def recognize_region(engine: OCREngine, image: np.ndarray, rect: Rect) -> list[TextBlock]:
    """영역만 잘라 인식하고 블록 좌표를 원본 이미지 기준으로 되돌림"""
    crop = crop_region(image, rect)
    if crop.size == 0:
        return []

    dx, dy = max(0, rect.left), max(0, rect.top)
    return [
        TextBlock(
            text=block.text,
            rect=Rect(
                left=block.rect.left + dx,
                top=block.rect.top + dy,
                right=block.rect.right + dx,
                bottom=block.rect.bottom + dy,
            ),
            confidence=block.confidence,
        )
        for block in engine.recognize(crop)
    ]


def join_text(blocks: list[TextBlock]) -> str:
    """블록 텍스트를 줄바꿈으로 연결"""
    return "\n".join(block.text for block in blocks)
