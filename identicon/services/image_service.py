from pathlib import Path
from typing import Union
import logging

from werkzeug.utils import secure_filename

from ..config import CANVAS_SIZE, BACKGROUND_COLOR, OUTPUT_IMG_EXT, SANITIZE_FILENAMES
from ..models.image import Image
from ..models.identicon import PixelMap
from ..repositories.image_repository import ImageRepository
from ..errors import PersistenceFailure

logger = logging.getLogger(__name__)


class ImageService:
    """Canvas drawing, PNG encoding and saving.  No grid logic here."""

    def __init__(self, canvas_size: int = CANVAS_SIZE, background=BACKGROUND_COLOR):
        self.canvas_size = canvas_size
        self.background = background
        self.image_repository = ImageRepository()

    def create_canvas(self) -> Image:
        return self.image_repository.create_canvas(self.canvas_size, self.canvas_size, self.background)

    def draw_image(self, pixel_map: PixelMap) -> Image:
        """
        Paint every rectangle of *pixel_map* in its color on a fresh canvas.

        An empty pixel map gives a blank (background only) canvas.

        Raises:
            RenderFailure: If the canvas cannot be allocated or drawn on.
        """
        image = self.create_canvas()
        for entry in pixel_map.pixel_map:
            self.image_repository.fill_rectangle(image, entry.top_left, entry.bottom_right, pixel_map.color)
        logger.debug(f"Drew {len(pixel_map.pixel_map)} squares in {pixel_map.color}")
        return image

    def encode(self, image: Image) -> bytes:
        """
        Business-level method to turn the canvas into PNG bytes.
        """
        return self.image_repository.encode(image, fmt="PNG")

    @staticmethod
    def output_name(text: str, hexdigest: str, sanitize: bool = SANITIZE_FILENAMES) -> str:
        """
        File name for *text*: "<text>.png", made filesystem safe unless *sanitize* is off.

        Falls back to the hex digest when nothing usable survives sanitizing.
        """
        stem = secure_filename(text) if sanitize else text
        if not stem:
            stem = hexdigest
        return f"{stem}{OUTPUT_IMG_EXT}"

    def output_path(
        self,
        text: str,
        hexdigest: str,
        output_dir: Union[str, Path],
        *,
        sanitize: bool = SANITIZE_FILENAMES,
    ) -> Path:
        return Path(output_dir) / self.output_name(text, hexdigest, sanitize=sanitize)

    def save(self, image: Image) -> Path:
        """
        Business-level method to encode the image and write it to its path.

        Raises:
            PersistenceFailure: If the image has no path, or on any filesystem error.
        """
        if image.path is None:
            raise PersistenceFailure("Image has no target path")
        path = self.image_repository.write(self.encode(image), image.path)
        logger.info(f"Saved identicon: {path}")
        return path
