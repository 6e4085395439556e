"""
Unit tests for PixelMapService
"""

import pytest

from identicon.config import CANVAS_SIZE, CELL_SIZE
from identicon.models.identicon import FilteredGrid, GridCell, PixelMapEntry
from identicon.services.pixel_map_service import PixelMapService


@pytest.fixture
def service():
    return PixelMapService()


class TestPixelMapService:

    def test_first_and_last_banana_cells(self, service, banana_hex):
        filtered = FilteredGrid(
            hex=banana_hex,
            color=(114, 179, 2),
            grid=(GridCell(114, 0), GridCell(2, 2), GridCell(124, 22)),
        )
        pixel_map = service.build_pixel_map(filtered)

        assert pixel_map.pixel_map == (
            PixelMapEntry((0, 0), (50, 50)),
            PixelMapEntry((100, 0), (150, 50)),
            PixelMapEntry((100, 200), (150, 250)),
        )
        assert pixel_map.color == (114, 179, 2)
        assert pixel_map.grid == filtered.grid

    @pytest.mark.parametrize("index", range(25))
    def test_geometry_for_every_index(self, service, index):
        entry = service.cell_rectangle(index)
        x, y = entry.top_left
        assert (x, y) == (CELL_SIZE * (index % 5), CELL_SIZE * (index // 5))
        assert entry.bottom_right == (x + CELL_SIZE, y + CELL_SIZE)
        for coord in (*entry.top_left, *entry.bottom_right):
            assert 0 <= coord <= CANVAS_SIZE

    def test_empty_grid_gives_empty_map(self, service):
        pixel_map = service.build_pixel_map(FilteredGrid(hex=(), color=(0, 0, 0), grid=()))
        assert pixel_map.pixel_map == ()

    def test_order_preserved(self, service):
        cells = (GridCell(0, 24), GridCell(0, 3), GridCell(0, 12))
        pixel_map = service.build_pixel_map(FilteredGrid(hex=(), color=(0, 0, 0), grid=cells))
        assert [entry.top_left for entry in pixel_map.pixel_map] == [(200, 200), (150, 0), (100, 100)]

    def test_out_of_range_index_asserts(self, service):
        with pytest.raises(AssertionError):
            service.cell_rectangle(25)
