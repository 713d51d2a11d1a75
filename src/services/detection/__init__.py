"""Detection 모듈

사용법:
    from src.services.detection import get_detection

    detector = get_detection()
    regions = detector.detect(ArrayImage(image))

백엔드 선택 (.env DETECTION_PROVIDER):
    - "grid": 그리드 + 밝기 통계 휴리스틱 (기본값)
"""

from src.config import Settings, get_settings
from src.services.detection.base import Detector, InvalidImageError, PixelSource
from src.services.detection.filters import largest
from src.services.detection.grid_detector import GridBubbleDetector, detect
from src.services.detection.image import ArrayImage
from src.services.detection.schemas import DetectionConfig

__all__ = [
    "ArrayImage",
    "DetectionConfig",
    "Detector",
    "InvalidImageError",
    "PixelSource",
    "detect",
    "get_detection",
    "largest",
    "set_detection",
]

_detector: Detector | None = None


def config_from_settings(settings: Settings) -> DetectionConfig:
    return DetectionConfig(
        cell_size=settings.detection_cell_size,
        sample_stride=settings.detection_sample_stride,
        brightness_threshold=settings.detection_brightness_threshold,
        min_white_ratio=settings.detection_min_white_ratio,
        max_white_ratio=settings.detection_max_white_ratio,
        min_region_size=settings.detection_min_region_size,
        max_region_size=settings.detection_max_region_size,
    )


def get_detection() -> Detector:
    """설정에 따라 detection 백엔드 반환"""
    global _detector
    if _detector is None:
        settings = get_settings()
        if settings.detection_provider == "grid":
            _detector = GridBubbleDetector(config_from_settings(settings))
        else:
            raise ValueError(f"Unknown detection provider: {settings.detection_provider!r}")
    return _detector


def set_detection(detector: Detector | None) -> None:
    """detection 백엔드 설정 (테스트용)"""
    global _detector
    _detector = detector
