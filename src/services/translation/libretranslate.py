"""LibreTranslate 기반 번역 구현체"""

import logging
from typing import Any

import httpx

from src.schemas.pipeline import TranslationResult
from src.services.translation.base import TranslationError

logger = logging.getLogger(__name__)


class LibreTranslateTranslation:
    """LibreTranslate API (자체 호스팅 또는 공개 인스턴스) 텍스트 번역"""

    def __init__(self, base_url: str, api_key: str = "", timeout: int = 30) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    def translate(self, text: str, source: str, target: str) -> str:
        if not text.strip():
            raise TranslationError("번역할 텍스트가 비어 있습니다")

        payload: dict[str, Any] = {
            "q": text.strip(),
            "source": source,
            "target": target,
            "format": "text",
        }
        if self._api_key:
            payload["api_key"] = self._api_key

        logger.debug(f"번역 요청: {source} → {target}, {len(payload['q'])}자")

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(f"{self._base_url}/translate", json=payload)
                resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise TranslationError("LibreTranslate API 타임아웃") from e
        except httpx.HTTPStatusError as e:
            raise TranslationError(f"LibreTranslate API 오류: {e.response.status_code}") from e
        except Exception as e:
            raise TranslationError(f"LibreTranslate API 호출 실패: {e}") from e

        return self._parse_response(resp)

    def translate_batch(
        self, texts: list[str], source: str, target: str
    ) -> list[TranslationResult]:
        results: list[TranslationResult] = []

        for idx, text in enumerate(texts):
            try:
                translated = self.translate(text, source, target)
            except TranslationError as e:
                logger.warning(f"번역 실패 스킵: index={idx} - {e}")
                continue
            results.append(TranslationResult(index=idx, translated=translated))

        logger.info(f"번역 완료: {len(results)}/{len(texts)}개")
        return results

    def _parse_response(self, resp: httpx.Response) -> str:
        try:
            data = resp.json()
        except ValueError as e:
            raise TranslationError(f"JSON 파싱 실패: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("translatedText"), str):
            raise TranslationError(f"응답에 translatedText가 없음: {data!r}")

        return data["translatedText"]
