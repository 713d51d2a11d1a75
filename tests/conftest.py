from collections.abc import Generator
from io import BytesIO

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from src.main import app
from src.services.detection import set_detection
from src.services.ocr import set_ocr
from src.services.translation import set_translation


def striped_array(width: int, height: int, stripe: int = 10) -> np.ndarray:
    """흰/검정 세로 줄무늬 RGB 배열

    stride 5 샘플링 시 밝은 픽셀 비율이 정확히 50%.
    """
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    for x in range(0, width, stripe * 2):
        arr[:, x : x + stripe] = 255
    return arr


def make_test_image(array: np.ndarray | None = None, fmt: str = "PNG") -> BytesIO:
    """테스트용 실제 이미지 바이트 생성 (기본: 200x100 줄무늬)"""
    if array is None:
        array = striped_array(200, 100)
    buf = BytesIO()
    Image.fromarray(array).save(buf, format=fmt)
    buf.seek(0)
    return buf


@pytest.fixture
def reset_backends() -> Generator[None, None, None]:
    set_detection(None)
    set_ocr(None)
    set_translation(None)
    yield
    set_detection(None)
    set_ocr(None)
    set_translation(None)


@pytest.fixture
def client(reset_backends: None) -> TestClient:
    return TestClient(app)
