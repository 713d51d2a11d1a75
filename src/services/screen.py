"""화면 이미지 탐지/번역 응답 조립"""

import numpy as np

from src.schemas.base import BaseSchema
from src.schemas.pipeline import CandidateRegion, TranslatedRegion
from src.services.detection import ArrayImage, get_detection, largest
from src.services.detection.schemas import DetectionResponse, ImageSize, RegionSchema
from src.services.pipeline import translate_screen


class TranslatedRegionSchema(BaseSchema):
    region: RegionSchema
    original_text: str
    translated_text: str


class TranslateScreenResponse(BaseSchema):
    source: str
    target: str
    regions: list[TranslatedRegionSchema]


def to_region_schema(region: CandidateRegion) -> RegionSchema:
    rect = region.rect
    return RegionSchema(
        left=rect.left,
        top=rect.top,
        right=rect.right,
        bottom=rect.bottom,
        confidence=region.confidence,
    )


def detect_screen(image: np.ndarray) -> DetectionResponse:
    source = ArrayImage(image)
    regions = get_detection().detect(source)
    best = largest(regions)

    return DetectionResponse(
        image_size=ImageSize(width=source.width, height=source.height),
        regions=[to_region_schema(r) for r in regions],
        largest=to_region_schema(best) if best else None,
    )


def _to_translated_schema(item: TranslatedRegion) -> TranslatedRegionSchema:
    return TranslatedRegionSchema(
        region=to_region_schema(item.region),
        original_text=item.original_text,
        translated_text=item.translated_text,
    )


def translate_screen_response(
    image: np.ndarray, source: str, target: str
) -> TranslateScreenResponse:
    translated = translate_screen(image, source, target)
    return TranslateScreenResponse(
        source=source,
        target=target,
        regions=[_to_translated_schema(t) for t in translated],
    )
