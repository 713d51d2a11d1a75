"""Translation 팩토리 테스트"""

from unittest.mock import patch

import pytest

from src.constants import language_name
from src.schemas.pipeline import TranslationResult
from src.services.translation import get_translation, set_translation
from src.services.translation.libretranslate import LibreTranslateTranslation


class TestGetTranslation:
    def setup_method(self) -> None:
        set_translation(None)

    def teardown_method(self) -> None:
        set_translation(None)

    def test_default_returns_libretranslate(self) -> None:
        assert isinstance(get_translation(), LibreTranslateTranslation)

    def test_set_translation_overrides_factory(self) -> None:
        mock = MockTranslator()
        set_translation(mock)
        assert get_translation() is mock

    def test_unknown_provider_raises(self) -> None:
        with patch("src.services.translation.get_settings") as mock_settings:
            mock_settings.return_value.translation_provider = "unknown"
            with pytest.raises(ValueError, match="Unknown translation provider"):
                get_translation()


class TestLanguageName:
    @pytest.mark.parametrize(
        ("code", "name"),
        [("en", "English"), ("ja", "Japanese"), ("zh", "Chinese"), ("ko", "Korean")],
    )
    def test_known_codes(self, code: str, name: str) -> None:
        assert language_name(code) == name

    def test_unknown_code(self) -> None:
        assert language_name("xx") == "Unknown"


class MockTranslator:
    def translate(self, text: str, source: str, target: str) -> str:
        return text

    def translate_batch(
        self, texts: list[str], source: str, target: str
    ) -> list[TranslationResult]:
        return []
