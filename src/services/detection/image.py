"""numpy 배열 기반 PixelSource 구현"""

import io

import cv2
import numpy as np
from PIL import Image

from src.services.detection.base import InvalidImageError


class ImageTooLargeError(InvalidImageError):
    """픽셀 수 제한을 넘는 이미지"""


class ArrayImage:
    """RGB/RGBA/Grayscale numpy 배열을 PixelSource로 감쌈

    배열은 복사하지 않음. 탐지 중 호출자가 배열을 변경하면 안 됨.
    """

    def __init__(self, array: np.ndarray) -> None:
        if array.ndim not in (2, 3):
            raise InvalidImageError(f"2차원 또는 3차원 배열이어야 합니다: ndim={array.ndim}")
        if array.ndim == 3 and array.shape[2] not in (3, 4):
            raise InvalidImageError(f"지원하지 않는 채널 수: {array.shape[2]}")
        if array.dtype != np.uint8:
            raise InvalidImageError(f"8비트(uint8) 배열이어야 합니다: dtype={array.dtype}")
        self._array = array

    @classmethod
    def from_bgr(cls, array: np.ndarray) -> "ArrayImage":
        """OpenCV(BGR/BGRA) 배열에서 생성"""
        if array.ndim == 3 and array.shape[2] == 4:
            return cls(cv2.cvtColor(array, cv2.COLOR_BGRA2RGBA))
        if array.ndim == 3:
            return cls(cv2.cvtColor(array, cv2.COLOR_BGR2RGB))
        return cls(array)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ArrayImage":
        if image.mode not in ("L", "RGB", "RGBA"):
            image = image.convert("RGB")
        return cls(np.asarray(image))

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def width(self) -> int:
        return int(self._array.shape[1])

    @property
    def height(self) -> int:
        return int(self._array.shape[0])

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int]:
        value = self._array[y, x]
        if self._array.ndim == 2:
            v = int(value)
            return (v, v, v)
        return (int(value[0]), int(value[1]), int(value[2]))


def decode_image(data: bytes, max_pixels: int | None = None) -> np.ndarray:
    """이미지 바이트 → RGB numpy 배열

    max_pixels가 주어지면 디코딩 전에 헤더의 크기로 픽셀 수를 검사.

    Raises:
        ImageTooLargeError: 픽셀 수 제한 초과 (Pillow decompression bomb 포함)
        InvalidImageError: 디코딩 실패 시
    """
    try:
        img = Image.open(io.BytesIO(data))
    except Image.DecompressionBombError as e:
        raise ImageTooLargeError(f"이미지 픽셀 수 초과: {e}") from e
    except Exception as e:
        raise InvalidImageError(f"이미지를 디코딩할 수 없음: {e}") from e

    with img:
        width, height = img.size
        if max_pixels is not None and width * height > max_pixels:
            raise ImageTooLargeError(
                f"총 픽셀수 초과: {width}x{height} = {width * height} (최대 {max_pixels})"
            )

        try:
            return np.array(img.convert("RGB"))
        except Exception as e:
            raise InvalidImageError(f"이미지를 디코딩할 수 없음: {e}") from e
