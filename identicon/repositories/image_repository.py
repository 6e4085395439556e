from pathlib import Path
from typing import Tuple, Union
from io import BytesIO
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..errors import RenderFailure, PersistenceFailure

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles canvas allocation, drawing, encoding and file I/O for Image entities.
    """

    @staticmethod
    def create_canvas(
        width: int,
        height: int,
        background: Tuple[int, int, int],
    ) -> Image:
        try:
            pixels = np.empty((height, width, 3), dtype=np.uint8)
            pixels[:] = background
        except (ValueError, MemoryError) as err:
            raise RenderFailure(f"Could not allocate {width}x{height} canvas: {err}") from err
        return Image(pixels)

    @staticmethod
    def fill_rectangle(
        image: Image,
        top_left: Tuple[int, int],
        bottom_right: Tuple[int, int],
        color: Tuple[int, int, int],
    ) -> None:
        """
        Paint the half-open rectangle [top_left, bottom_right) in place.

        cv2.rectangle treats both corners as inclusive, so the far corner is
        pulled in by one pixel.
        """
        (x1, y1), (x2, y2) = top_left, bottom_right
        if x2 <= x1 or y2 <= y1:
            return
        try:
            cv2.rectangle(
                image.pixels,
                (int(x1), int(y1)),
                (int(x2) - 1, int(y2) - 1),
                tuple(int(c) for c in color),
                thickness=cv2.FILLED,
            )
        except cv2.error as err:
            raise RenderFailure(f"Could not fill rectangle {top_left}-{bottom_right}: {err}") from err

    @staticmethod
    def encode(image: Image, fmt: str = "PNG") -> bytes:
        np_img = image.pixels
        if not np_img.flags['C_CONTIGUOUS']:
            np_img = np.ascontiguousarray(np_img)

        buffer = BytesIO()
        try:
            PILImage.fromarray(np_img).save(buffer, format=fmt)
        except (OSError, ValueError, TypeError) as err:
            raise RenderFailure(f"Could not encode canvas as {fmt}: {err}") from err
        return buffer.getvalue()

    @staticmethod
    def write(data: bytes, path: Union[str, Path]) -> Path:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as err:
            raise PersistenceFailure(f"Could not write {path}: {err}") from err
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return path
