"""Translation Protocol

교체 가능한 번역 구현을 위한 인터페이스 정의.
"""

from typing import Protocol

from src.schemas.pipeline import TranslationResult


class TranslationError(Exception):
    pass


class Translator(Protocol):
    """텍스트 번역 인터페이스

    구현체:
    - LibreTranslateTranslation: LibreTranslate HTTP API
    """

    def translate(self, text: str, source: str, target: str) -> str:
        """단일 텍스트 번역

        Raises:
            TranslationError: 빈 텍스트, API 호출 실패, 응답 파싱 실패 시
        """
        ...

    def translate_batch(
        self, texts: list[str], source: str, target: str
    ) -> list[TranslationResult]:
        """여러 텍스트를 개별 번역

        Returns:
            list[TranslationResult]: 성공한 번역만 (입력 인덱스 기준)
        """
        ...
