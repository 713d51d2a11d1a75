from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.constants import Detection, Language


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Detection
    detection_provider: str = "grid"  # "grid"
    detection_cell_size: int = Detection.CELL_SIZE
    detection_sample_stride: int = Detection.SAMPLE_STRIDE
    detection_brightness_threshold: int = Detection.BRIGHTNESS_THRESHOLD
    detection_min_white_ratio: float = Detection.MIN_WHITE_RATIO
    detection_max_white_ratio: float = Detection.MAX_WHITE_RATIO
    detection_min_region_size: int = Detection.MIN_REGION_SIZE
    detection_max_region_size: int = Detection.MAX_REGION_SIZE

    # OCR
    ocr_provider: str = "tesseract"  # "tesseract"
    tesseract_lang: str = "jpn"
    tesseract_cmd: str = ""  # 비어 있으면 PATH의 tesseract 사용

    # Translation
    translation_provider: str = "libretranslate"  # "libretranslate"
    libretranslate_url: str = "https://libretranslate.com"
    libretranslate_api_key: str = ""
    translation_timeout: int = 30

    # Languages
    source_language: str = Language.JA
    target_language: str = Language.EN


@lru_cache
def get_settings() -> Settings:
    return Settings()
