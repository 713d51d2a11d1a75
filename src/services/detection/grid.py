"""그리드 분할"""

from src.schemas.pipeline import Rect


def partition_grid(width: int, height: int, cell_size: int, min_size: int) -> list[Rect]:
    """이미지를 cell_size 격자로 분할 (행 우선: y 바깥, x 안쪽)

    가장자리 셀은 이미지 경계로 잘리며, 잘린 폭/높이 중 하나라도
    min_size 미만이면 버림. 순회 순서가 병합 결과를 결정하므로 유지해야 함.
    """
    cells: list[Rect] = []

    for y in range(0, height, cell_size):
        for x in range(0, width, cell_size):
            w = min(cell_size, width - x)
            h = min(cell_size, height - y)
            if w < min_size or h < min_size:
                continue
            cells.append(Rect.from_xywh(x, y, w, h))

    return cells
