"""셀 밝기 통계 기반 말풍선 분류기

흰 배경 + 어두운 글자 획이 섞인 셀을 말풍선 후보로 판단.
완전히 흰 배경(비율 ≈ 1.0)과 어두운/사진 영역(비율 ≈ 0.0)은 제외.
"""

from src.constants import Detection
from src.schemas.pipeline import CandidateRegion, Rect
from src.services.detection.base import PixelSource
from src.services.detection.schemas import DetectionConfig


def brightness(rgb: tuple[int, int, int]) -> int:
    """8비트 채널 평균 밝기 [0, 255]"""
    r, g, b = rgb
    return (r + g + b) // 3


def white_ratio(
    image: PixelSource,
    cell: Rect,
    stride: int = Detection.SAMPLE_STRIDE,
    threshold: int = Detection.BRIGHTNESS_THRESHOLD,
) -> float | None:
    """stride 간격 샘플링으로 밝은 픽셀 비율 계산

    이미지 밖 좌표는 건너뜀. 샘플이 하나도 없으면 None.
    """
    light = 0
    total = 0

    for y in range(cell.top, cell.bottom, stride):
        for x in range(cell.left, cell.right, stride):
            if x < 0 or y < 0 or x >= image.width or y >= image.height:
                continue
            if brightness(image.pixel_at(x, y)) > threshold:
                light += 1
            total += 1

    if total == 0:
        return None
    return light / total


def is_bubble_like(image: PixelSource, cell: Rect, config: DetectionConfig) -> bool:
    ratio = white_ratio(image, cell, config.sample_stride, config.brightness_threshold)
    if ratio is None:
        return False
    return config.min_white_ratio <= ratio <= config.max_white_ratio


def classify_cell(
    image: PixelSource, cell: Rect, config: DetectionConfig
) -> CandidateRegion | None:
    """말풍선 후보면 CandidateRegion, 아니면 None"""
    if is_bubble_like(image, cell, config):
        return CandidateRegion(rect=cell, confidence=Detection.CONFIDENCE)
    return None
