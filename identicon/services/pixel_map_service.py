from ..config import CELL_SIZE, GRID_WIDTH
from ..models.identicon import FilteredGrid, PixelMap, PixelMapEntry


class PixelMapService:
    """Maps grid indices to rectangles on the canvas."""

    def __init__(self, cell_size: int = CELL_SIZE, grid_width: int = GRID_WIDTH):
        self.cell_size = cell_size
        self.grid_width = grid_width

    def cell_rectangle(self, index: int) -> PixelMapEntry:
        assert 0 <= index < self.grid_width * self.grid_width, f"grid index out of range: {index}"

        horizontal = (index % self.grid_width) * self.cell_size
        vertical = (index // self.grid_width) * self.cell_size

        top_left = (horizontal, vertical)
        bottom_right = (horizontal + self.cell_size, vertical + self.cell_size)
        return PixelMapEntry(top_left=top_left, bottom_right=bottom_right)

    def build_pixel_map(self, filtered: FilteredGrid) -> PixelMap:
        pixel_map = tuple(self.cell_rectangle(cell.index) for cell in filtered.grid)
        return PixelMap(
            hex=filtered.hex,
            color=filtered.color,
            grid=filtered.grid,
            pixel_map=pixel_map,
        )
