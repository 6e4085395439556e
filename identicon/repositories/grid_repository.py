from typing import Sequence, Tuple
import numpy as np

from ..models.identicon import GridCell


class GridRepository:
    """
    Repository for raw data operations on hash bytes and grid cells.
    Handles chunking, mirroring, indexing and filtering.
    """

    # [a, b, c] -> [a, b, c, b, a]
    MIRROR_COLUMNS = [0, 1, 2, 1, 0]

    @staticmethod
    def chunk(values: Sequence[int], size: int) -> np.ndarray:
        """
        Split *values* into consecutive rows of *size* items.

        Args:
            values: Flat sequence of byte values
            size: Row length

        Returns:
            np.ndarray: Shape (n, size), dtype uint8. A trailing partial row is dropped.
        """
        full_rows = len(values) // size
        kept = np.asarray(values[:full_rows * size], dtype=np.uint8)
        return kept.reshape(full_rows, size)

    def mirror(self, rows: np.ndarray) -> np.ndarray:
        """
        Expand every 3-wide row into its 5-wide palindrome in one pass.

        Args:
            rows: Shape (n, 3) array

        Returns:
            np.ndarray: Shape (n, 5) array
        """
        return rows[:, self.MIRROR_COLUMNS]

    @staticmethod
    def with_index(values: np.ndarray) -> Tuple[GridCell, ...]:
        return tuple(
            GridCell(value=int(value), index=index)
            for index, value in enumerate(values.ravel())
        )

    @staticmethod
    def filter_by_even_value(cells: Sequence[GridCell]) -> Tuple[GridCell, ...]:
        """
        Keep cells whose value is even, preserving order and original indices.
        """
        return tuple(cell for cell in cells if cell.value % 2 == 0)
