"""파이프라인 데이터 모델

Detection → OCR → Translation 전체에서 사용하는 공통 스키마.
모든 좌표는 원본 이미지 기준 정수 픽셀 좌표.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.constants import Detection


class Rect(BaseModel):
    """축 정렬 사각형 (left, top, right, bottom)

    유효성:
    - left <= right, top <= bottom (역전 시 ValidationError)
    - 불변 값 타입: 결합 연산은 항상 새 Rect를 반환
    """

    model_config = ConfigDict(frozen=True)

    left: int
    top: int
    right: int
    bottom: int

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.left > self.right or self.top > self.bottom:
            raise ValueError(
                f"Rect requires left <= right and top <= bottom, got "
                f"({self.left}, {self.top}, {self.right}, {self.bottom})"
            )
        return self

    @classmethod
    def from_xywh(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(left=x, top=y, right=x + w, bottom=y + h)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: "Rect") -> bool:
        """면적이 있는 겹침이 있는지 확인 (변이 맞닿기만 한 경우는 False)"""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def union(self, other: "Rect") -> "Rect":
        """두 사각형을 모두 포함하는 최소 바운딩 박스"""
        return Rect(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def to_tuple(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) 튜플 (PIL crop 등에 사용)"""
        return (self.left, self.top, self.right, self.bottom)


class CandidateRegion(BaseModel):
    """말풍선 후보 영역 (사각형 + 신뢰도)

    신뢰도는 휴리스틱 상수(Detection.CONFIDENCE)이며 확률이 아님.
    """

    model_config = ConfigDict(frozen=True)

    rect: Rect
    confidence: float = Field(default=Detection.CONFIDENCE, ge=0.0, le=1.0)


class TextBlock(BaseModel):
    """OCR 결과 텍스트 블록"""

    text: str
    rect: Rect
    confidence: float = Field(ge=0.0, le=1.0)


class TranslationResult(BaseModel):
    """번역 결과 (단일 텍스트)"""

    index: int
    translated: str


class TranslatedRegion(BaseModel):
    """번역된 말풍선 영역"""

    region: CandidateRegion
    original_text: str = ""
    translated_text: str = ""
