"""Detection Protocol

교체 가능한 말풍선 탐지 구현을 위한 인터페이스 정의.
모든 좌표는 원본 이미지 기준 절대 좌표(px).
"""

from typing import Protocol

from src.schemas.pipeline import CandidateRegion


class InvalidImageError(ValueError):
    """탐지할 수 없는 입력 이미지 (음수 크기, 디코딩 실패 등)"""


class PixelSource(Protocol):
    """읽기 전용 래스터 이미지

    구현체:
    - ArrayImage: numpy 배열 래퍼
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int]:
        """(x, y) 픽셀의 8비트 (R, G, B)"""
        ...


class Detector(Protocol):
    """말풍선 후보 영역 탐지 인터페이스

    구현체:
    - GridBubbleDetector: 그리드 + 밝기 통계 휴리스틱
    """

    def detect(self, image: PixelSource) -> list[CandidateRegion]:
        """이미지에서 말풍선 후보 영역 탐지

        Args:
            image: 탐지 대상 이미지 (변이하지 않음)

        Returns:
            list[CandidateRegion]: 병합 순서대로의 후보 영역 (순위 보장 없음)

        Raises:
            InvalidImageError: 이미지 크기가 음수인 경우
        """
        ...
