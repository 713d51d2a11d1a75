"""후보 영역 크기 필터 / 선택"""

from src.schemas.pipeline import CandidateRegion


def filter_by_size(
    regions: list[CandidateRegion], min_size: int, max_size: int
) -> list[CandidateRegion]:
    """폭/높이 모두 [min_size, max_size] 안인 영역만 유지 (순서 유지)"""
    return [
        region
        for region in regions
        if min_size <= region.rect.width <= max_size
        and min_size <= region.rect.height <= max_size
    ]


def largest(regions: list[CandidateRegion]) -> CandidateRegion | None:
    """면적이 가장 큰 영역 (동률이면 먼저 나온 것, 빈 입력이면 None)"""
    best: CandidateRegion | None = None

    for region in regions:
        if best is None or region.rect.area > best.rect.area:
            best = region

    return best
