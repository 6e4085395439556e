from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]
Point = Tuple[int, int]


@dataclass(frozen=True)
class RawHash:
    """
    Output of the hasher: the digest as a tuple of ints in [0, 255].
    """
    hex: Tuple[int, ...]


@dataclass(frozen=True)
class ColoredHash:
    hex: Tuple[int, ...]
    color: Color  # (r, g, b) taken from hex[0:3]


@dataclass(frozen=True)
class GridCell:
    value: int  # hash byte (possibly a mirrored copy)
    index: int  # position in the flattened 5x5 grid, never renumbered


@dataclass(frozen=True)
class GridResult:
    """
    Full mirrored grid, one cell per position (25 for a 16-byte digest).
    """
    hex: Tuple[int, ...]
    color: Color
    grid: Tuple[GridCell, ...]


@dataclass(frozen=True)
class FilteredGrid:
    """
    Only the cells that get painted (even values), original order and indices.
    """
    hex: Tuple[int, ...]
    color: Color
    grid: Tuple[GridCell, ...]


@dataclass(frozen=True)
class PixelMapEntry:
    top_left: Point      # (x, y), inclusive
    bottom_right: Point  # (x, y), exclusive


@dataclass(frozen=True)
class PixelMap:
    """
    Everything the renderer needs: the color and one rectangle per painted cell.
    """
    hex: Tuple[int, ...]
    color: Color
    grid: Tuple[GridCell, ...]
    pixel_map: Tuple[PixelMapEntry, ...]
