"""Tesseract 기반 OCR 구현체"""

# pyright: reportMissingTypeStubs=false

import logging
from typing import Any

import cv2
import numpy as np
import pytesseract

from src.schemas.pipeline import Rect, TextBlock
from src.services.ocr.base import OCRError

logger = logging.getLogger(__name__)


def configure_tesseract_cmd(tesseract_cmd: str) -> None:
    """tesseract 실행 파일 경로 설정

    pytesseract 모듈 전역 설정이므로 프로세스 전체에 적용됨.
    빈 문자열이면 PATH의 tesseract를 그대로 사용.
    """
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd


class TesseractOCR:
    """pytesseract image_to_data 결과를 블록 단위로 묶어 반환

    실행 파일 경로는 인스턴스가 아닌 configure_tesseract_cmd()로 한 번 설정.
    """

    def __init__(self, lang: str = "jpn") -> None:
        self._lang = lang

    def recognize(self, image: np.ndarray) -> list[TextBlock]:
        if image.size == 0:
            return []

        gray = self._to_gray(image)
        try:
            data = pytesseract.image_to_data(
                gray, lang=self._lang, output_type=pytesseract.Output.DICT
            )
        except pytesseract.TesseractError as e:
            raise OCRError(f"Tesseract 인식 실패: {e}") from e
        except pytesseract.TesseractNotFoundError as e:
            raise OCRError("tesseract 실행 파일을 찾을 수 없습니다") from e

        blocks = self._group_blocks(data)
        logger.info(f"OCR 완료: {len(blocks)}개 블록")
        return blocks

    def _to_gray(self, image: np.ndarray) -> np.ndarray:
        if image.ndim == 2:
            return image
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_RGBA2GRAY)
        return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)

    def _group_blocks(self, data: dict[str, list[Any]]) -> list[TextBlock]:
        words: dict[int, list[int]] = {}
        for i, text in enumerate(data["text"]):
            if not str(text).strip():
                continue
            # conf -1: 단어가 아닌 레이아웃 항목
            if float(data["conf"][i]) < 0:
                continue
            words.setdefault(int(data["block_num"][i]), []).append(i)

        blocks: list[TextBlock] = []
        for indices in words.values():
            left = min(int(data["left"][i]) for i in indices)
            top = min(int(data["top"][i]) for i in indices)
            right = max(int(data["left"][i]) + int(data["width"][i]) for i in indices)
            bottom = max(int(data["top"][i]) + int(data["height"][i]) for i in indices)
            confidence = sum(float(data["conf"][i]) for i in indices) / len(indices) / 100

            blocks.append(
                TextBlock(
                    text=" ".join(str(data["text"][i]).strip() for i in indices),
                    rect=Rect(left=left, top=top, right=right, bottom=bottom),
                    confidence=min(1.0, max(0.0, confidence)),
                )
            )

        return blocks
