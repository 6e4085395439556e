import logging
from typing import List, Sequence

import numpy as np

from ..config import GROUP_SIZE
from ..models.identicon import ColoredHash, GridResult, FilteredGrid
from ..repositories.grid_repository import GridRepository
from ..errors import InvalidInput

logger = logging.getLogger(__name__)


class GridService:
    """
    Business logic layer for building and filtering the identicon grid.
    Delegates array work to GridRepository.
    """

    def __init__(self):
        self.repository = GridRepository()

    def mirror_row(self, row: Sequence[int]) -> List[int]:
        """
        [a, b, c] -> [a, b, c, b, a]

        Single-row form of the mirroring build_grid applies to every row.

        Raises:
            InvalidInput: If *row* does not hold exactly 3 values.
        """
        if len(row) != GROUP_SIZE:
            raise InvalidInput(f"A grid row needs exactly {GROUP_SIZE} values, got {len(row)}")
        return self.repository.mirror(np.asarray([row]))[0].tolist()

    def build_grid(self, colored: ColoredHash) -> GridResult:
        """
        Chunk the hash into rows of 3, mirror each row to 5 and number every cell.

        A trailing partial chunk is dropped (16 bytes -> 5 rows -> 25 cells);
        fewer than 3 bytes gives an empty grid.
        """
        rows = self.repository.chunk(colored.hex, GROUP_SIZE)
        mirrored = self.repository.mirror(rows)
        grid = self.repository.with_index(mirrored)
        logger.debug(f"Built grid with {len(grid)} cells from {len(colored.hex)} bytes")
        return GridResult(hex=colored.hex, color=colored.color, grid=grid)

    def filter_odd_squares(self, grid_result: GridResult) -> FilteredGrid:
        """
        Drop odd-valued cells. An all-odd grid yields an empty FilteredGrid.
        """
        kept = self.repository.filter_by_even_value(grid_result.grid)
        logger.debug(f"Kept {len(kept)}/{len(grid_result.grid)} cells")
        return FilteredGrid(hex=grid_result.hex, color=grid_result.color, grid=kept)
