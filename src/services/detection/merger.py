"""겹치는 후보 영역 병합"""

from src.constants import Detection
from src.schemas.pipeline import CandidateRegion


def merge_regions(candidates: list[CandidateRegion]) -> list[CandidateRegion]:
    """단일 전진 패스 그리디 병합

    i번째 미사용 후보에서 누적 사각형을 시작해, 이후 미사용 후보 중
    *현재 누적 사각형*과 겹치는 것을 순서대로 흡수한다. 누적 사각형이
    커지면서 원래 후보 i와는 겹치지 않던 후보도 합쳐질 수 있다.

    완전한 연결 요소 병합이 아니므로 입력 순서에 따라 결과 사각형끼리
    겹칠 수 있다. 결과를 바꾸므로 반복 병합으로 "보정"하지 않는다.
    """
    if not candidates:
        return []

    merged: list[CandidateRegion] = []
    used = [False] * len(candidates)

    for i, candidate in enumerate(candidates):
        if used[i]:
            continue

        current = candidate.rect
        for j in range(i + 1, len(candidates)):
            if used[j]:
                continue
            other = candidates[j].rect
            if current.intersects(other):
                current = current.union(other)
                used[j] = True

        merged.append(CandidateRegion(rect=current, confidence=Detection.CONFIDENCE))

    return merged
