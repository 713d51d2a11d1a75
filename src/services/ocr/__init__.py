"""OCR 모듈

사용법:
    from src.services.ocr import get_ocr

    engine = get_ocr()
    blocks = engine.recognize(image)

백엔드 선택 (.env OCR_PROVIDER):
    - "tesseract": Tesseract (기본값)
"""

from src.config import get_settings
from src.services.ocr.base import OCREngine, OCRError
from src.services.ocr.utils import crop_region, join_text, recognize_region

__all__ = [
    "OCREngine",
    "OCRError",
    "crop_region",
    "get_ocr",
    "join_text",
    "recognize_region",
    "set_ocr",
]

_engine: OCREngine | None = None


def get_ocr() -> OCREngine:
    """설정에 따라 OCR 백엔드 반환"""
    global _engine
    if _engine is None:
        settings = get_settings()
        if settings.ocr_provider == "tesseract":
            from src.services.ocr.tesseract import TesseractOCR, configure_tesseract_cmd

            configure_tesseract_cmd(settings.tesseract_cmd)
            _engine = TesseractOCR(lang=settings.tesseract_lang)
        else:
            raise ValueError(f"Unknown OCR provider: {settings.ocr_provider!r}")
    return _engine


def set_ocr(engine: OCREngine | None) -> None:
    """OCR 백엔드 설정 (테스트용)"""
    global _engine
    _engine = engine
