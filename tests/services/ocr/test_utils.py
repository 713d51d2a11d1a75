"""OCR utils 테스트"""

import numpy as np

from src.schemas.pipeline import Rect, TextBlock
from src.services.ocr.utils import crop_region, join_text, recognize_region


def _image(w: int = 200, h: int = 100) -> np.ndarray:
    arr = np.zeros((h, w, 3), dtype=np.uint8)
    arr[:, :, 0] = np.arange(w, dtype=np.uint8)[None, :]
    return arr


class FakeEngine:
    def __init__(self, blocks: list[TextBlock]) -> None:
        self._blocks = blocks
        self.shapes: list[tuple[int, ...]] = []

    def recognize(self, image: np.ndarray) -> list[TextBlock]:
        self.shapes.append(image.shape)
        return self._blocks


class TestCropRegion:
    def test_within_bounds(self) -> None:
        crop = crop_region(_image(), Rect(left=10, top=20, right=60, bottom=70))
        assert crop.shape == (50, 50, 3)
        assert crop[0, 0, 0] == 10

    def test_clamps_to_image(self) -> None:
        crop = crop_region(_image(), Rect(left=150, top=50, right=300, bottom=300))
        assert crop.shape == (50, 50, 3)

    def test_outside_returns_empty(self) -> None:
        crop = crop_region(_image(), Rect(left=300, top=300, right=400, bottom=400))
        assert crop.size == 0


class TestRecognizeRegion:
    def test_offsets_block_coordinates(self) -> None:
        block = TextBlock(
            text="こんにちは",
            rect=Rect(left=5, top=5, right=25, bottom=15),
            confidence=0.9,
        )
        engine = FakeEngine([block])

        result = recognize_region(engine, _image(), Rect(left=100, top=30, right=160, bottom=90))

        assert engine.shapes == [(60, 60, 3)]
        assert result == [
            TextBlock(
                text="こんにちは",
                rect=Rect(left=105, top=35, right=125, bottom=45),
                confidence=0.9,
            )
        ]

    def test_empty_crop_skips_engine(self) -> None:
        engine = FakeEngine([])
        result = recognize_region(engine, _image(), Rect(left=500, top=500, right=600, bottom=600))
        assert result == []
        assert engine.shapes == []


class TestJoinText:
    def test_newline_joined(self) -> None:
        blocks = [
            TextBlock(text="a", rect=Rect.from_xywh(0, 0, 1, 1), confidence=1.0),
            TextBlock(text="b", rect=Rect.from_xywh(0, 0, 1, 1), confidence=1.0),
        ]
        assert join_text(blocks) == "a\nb"

    def test_empty(self) -> None:
        assert join_text([]) == ""
