"""화면 번역 파이프라인

Detection → OCR → Translation 순서로 실행.
각 단계는 Protocol 기반 모듈을 팩토리에서 가져옴.
"""

import logging

import numpy as np

from src.schemas.pipeline import CandidateRegion, TranslatedRegion
from src.services.detection import ArrayImage, get_detection
from src.services.ocr import OCRError, get_ocr, join_text, recognize_region
from src.services.translation import get_translation

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    pass


def recognize_regions(
    image: np.ndarray, regions: list[CandidateRegion]
) -> list[tuple[CandidateRegion, str]]:
    """각 영역을 잘라 OCR, 텍스트가 없는 영역은 제외

    Raises:
        PipelineError: OCR 엔진 실패 시
    """
    engine = get_ocr()
    recognized: list[tuple[CandidateRegion, str]] = []

    for region in regions:
        try:
            blocks = recognize_region(engine, image, region.rect)
        except OCRError as e:
            raise PipelineError(f"OCR 실패: {e}") from e

        text = join_text(blocks).strip()
        if text:
            recognized.append((region, text))

    return recognized


def translate_screen(image: np.ndarray, source: str, target: str) -> list[TranslatedRegion]:
    """화면 이미지의 말풍선 텍스트를 번역

    Args:
        image: RGB 이미지 (numpy 배열)
        source: 원문 언어 코드
        target: 번역 언어 코드

    Returns:
        번역된 영역 리스트 (탐지 순서). 번역에 실패한 영역은 제외.

    Raises:
        PipelineError: OCR 실패 시
        InvalidImageError: 탐지할 수 없는 이미지
    """
    # 1. Detection
    regions = get_detection().detect(ArrayImage(image))
    logger.info(f"Detection 완료: {len(regions)}개 말풍선")

    if not regions:
        return []

    # 2. OCR
    recognized = recognize_regions(image, regions)
    logger.info(f"OCR 완료: {len(recognized)}/{len(regions)}개 영역에서 텍스트 인식")

    if not recognized:
        return []

    # 3. Translation
    texts = [text for _, text in recognized]
    translations = get_translation().translate_batch(texts, source, target)
    logger.info(f"번역 결과: {len(translations)}/{len(texts)}개")

    return [
        TranslatedRegion(
            region=recognized[t.index][0],
            original_text=recognized[t.index][1],
            translated_text=t.translated,
        )
        for t in translations
    ]
