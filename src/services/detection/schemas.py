"""Detection 스키마"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.constants import Detection
from src.schemas.base import BaseSchema


class DetectionConfig(BaseModel):
    """그리드 탐지 파라미터

    잘못된 조합은 생성 시점에 ValidationError (스캔 전에 실패).
    """

    model_config = ConfigDict(frozen=True)

    cell_size: int = Field(default=Detection.CELL_SIZE, gt=0)
    sample_stride: int = Field(default=Detection.SAMPLE_STRIDE, gt=0)
    brightness_threshold: int = Field(default=Detection.BRIGHTNESS_THRESHOLD, ge=0, le=255)
    min_white_ratio: float = Field(default=Detection.MIN_WHITE_RATIO, ge=0.0, le=1.0)
    max_white_ratio: float = Field(default=Detection.MAX_WHITE_RATIO, ge=0.0, le=1.0)
    min_region_size: int = Field(default=Detection.MIN_REGION_SIZE, ge=0)
    max_region_size: int = Field(default=Detection.MAX_REGION_SIZE, ge=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        if self.min_white_ratio > self.max_white_ratio:
            raise ValueError(
                f"min_white_ratio ({self.min_white_ratio}) > "
                f"max_white_ratio ({self.max_white_ratio})"
            )
        if self.min_region_size > self.max_region_size:
            raise ValueError(
                f"min_region_size ({self.min_region_size}) > "
                f"max_region_size ({self.max_region_size})"
            )
        return self


class ImageSize(BaseSchema):
    width: int
    height: int


class RegionSchema(BaseSchema):
    """API 응답용 후보 영역"""

    left: int
    top: int
    right: int
    bottom: int
    confidence: float


class DetectionResponse(BaseSchema):
    """POST /detect 응답

    regions는 병합 순서 그대로. largest는 면적 최대 영역 (없으면 null).
    """

    image_size: ImageSize
    regions: list[RegionSchema]
    largest: RegionSchema | None = None
