"""그리드 분할 테스트"""

from src.schemas.pipeline import Rect
from src.services.detection.grid import partition_grid


class TestPartitionGrid:
    def test_exact_multiple(self) -> None:
        cells = partition_grid(200, 200, 100, 50)
        assert cells == [
            Rect.from_xywh(0, 0, 100, 100),
            Rect.from_xywh(100, 0, 100, 100),
            Rect.from_xywh(0, 100, 100, 100),
            Rect.from_xywh(100, 100, 100, 100),
        ]

    def test_row_major_order(self) -> None:
        cells = partition_grid(300, 200, 100, 50)
        assert [(c.left, c.top) for c in cells] == [
            (0, 0),
            (100, 0),
            (200, 0),
            (0, 100),
            (100, 100),
            (200, 100),
        ]

    def test_clips_remainder_at_least_min_size(self) -> None:
        cells = partition_grid(260, 100, 100, 50)
        assert cells[-1] == Rect(left=200, top=0, right=260, bottom=100)

    def test_drops_remainder_below_min_size(self) -> None:
        cells = partition_grid(230, 149, 100, 50)
        assert cells == [Rect.from_xywh(0, 0, 100, 100), Rect.from_xywh(100, 0, 100, 100)]

    def test_coverage_except_remainder_strip(self) -> None:
        cells = partition_grid(250, 130, 100, 50)
        assert len(cells) == 3
        assert sum(c.area for c in cells) == 250 * 100
        assert max(c.right for c in cells) == 250
        assert max(c.bottom for c in cells) == 100

    def test_cells_do_not_overlap(self) -> None:
        cells = partition_grid(350, 275, 100, 50)
        for i, a in enumerate(cells):
            for b in cells[i + 1 :]:
                assert not a.intersects(b)

    def test_empty_image(self) -> None:
        assert partition_grid(0, 0, 100, 50) == []

    def test_image_below_min_size(self) -> None:
        assert partition_grid(49, 300, 100, 50) == []
