"""그리드 기반 말풍선 탐지 구현체

분할 → 분류 → 병합 → 크기 필터 순서로 단방향 실행.
호출 간 상태를 갖지 않으므로 서로 다른 이미지에 대해 동시에 호출해도 안전.
"""

import logging

from src.schemas.pipeline import CandidateRegion
from src.services.detection.base import InvalidImageError, PixelSource
from src.services.detection.classifier import classify_cell
from src.services.detection.filters import filter_by_size
from src.services.detection.grid import partition_grid
from src.services.detection.merger import merge_regions
from src.services.detection.schemas import DetectionConfig

logger = logging.getLogger(__name__)


class GridBubbleDetector:
    """ML 모델 없이 밝기 통계와 사각형 기하만으로 말풍선 후보 탐지"""

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self._config = config or DetectionConfig()

    @property
    def config(self) -> DetectionConfig:
        return self._config

    def detect(self, image: PixelSource) -> list[CandidateRegion]:
        width, height = image.width, image.height
        if width < 0 or height < 0:
            raise InvalidImageError(f"이미지 크기가 음수입니다: {width}x{height}")

        config = self._config
        cells = partition_grid(width, height, config.cell_size, config.min_region_size)

        candidates: list[CandidateRegion] = []
        for cell in cells:
            region = classify_cell(image, cell, config)
            if region is not None:
                candidates.append(region)

        merged = merge_regions(candidates)
        regions = filter_by_size(merged, config.min_region_size, config.max_region_size)

        logger.info(
            f"Detection 완료 ({width}x{height}): "
            f"{len(cells)}개 셀, {len(candidates)}개 후보, {len(regions)}개 말풍선"
        )
        return regions


def detect(image: PixelSource, config: DetectionConfig | None = None) -> list[CandidateRegion]:
    """이미지에서 말풍선 후보 영역 탐지

    Raises:
        InvalidImageError: 이미지 크기가 음수인 경우
    """
    return GridBubbleDetector(config).detect(image)
