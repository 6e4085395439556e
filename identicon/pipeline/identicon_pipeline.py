"""
Identicon Pipeline
Chains hash -> color -> grid -> filter -> pixel map -> draw -> encode (-> save)
for a single input string.  Every stage returns a new value; only the canvas
is mutated, and it never leaves the run that created it.
"""

import logging
from pathlib import Path

from ..config import OUTPUT_DIR, SANITIZE_FILENAMES
from ..models.identicon import PixelMap
from ..models.image import Image
from ..services.hash_service import HashService
from ..services.color_service import ColorService
from ..services.grid_service import GridService
from ..services.pixel_map_service import PixelMapService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def build_pixel_map_for(
    text: str,
    *,
    hash_service: HashService = HashService(),
    color_service: ColorService = ColorService(),
    grid_service: GridService = GridService(),
    pixel_map_service: PixelMapService = PixelMapService(),
) -> PixelMap:
    """
    Run the geometry stages only.

    Raises:
        InvalidInput: If the digest is too short to pick a color.
    """
    raw = hash_service.hash_input(text)
    colored = color_service.pick_color(raw)
    grid_result = grid_service.build_grid(colored)
    filtered = grid_service.filter_odd_squares(grid_result)
    return pixel_map_service.build_pixel_map(filtered)


def draw_identicon(
    text: str,
    *,
    hash_service: HashService = HashService(),
    color_service: ColorService = ColorService(),
    grid_service: GridService = GridService(),
    pixel_map_service: PixelMapService = PixelMapService(),
    image_service: ImageService = ImageService(),
) -> Image:
    pixel_map = build_pixel_map_for(
        text,
        hash_service=hash_service,
        color_service=color_service,
        grid_service=grid_service,
        pixel_map_service=pixel_map_service,
    )
    if not pixel_map.pixel_map:
        logger.info(f"No even cells for {text!r}; image will be blank")
    return image_service.draw_image(pixel_map)


def render_identicon(
    text: str,
    *,
    hash_service: HashService = HashService(),
    color_service: ColorService = ColorService(),
    grid_service: GridService = GridService(),
    pixel_map_service: PixelMapService = PixelMapService(),
    image_service: ImageService = ImageService(),
) -> bytes:
    """
    In-memory identicon: PNG bytes for *text*, nothing written to disk.
    """
    image = draw_identicon(
        text,
        hash_service=hash_service,
        color_service=color_service,
        grid_service=grid_service,
        pixel_map_service=pixel_map_service,
        image_service=image_service,
    )
    return image_service.encode(image)


def generate_identicon(
    text: str,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    sanitize: bool = SANITIZE_FILENAMES,
    hash_service: HashService = HashService(),
    color_service: ColorService = ColorService(),
    grid_service: GridService = GridService(),
    pixel_map_service: PixelMapService = PixelMapService(),
    image_service: ImageService = ImageService(),
) -> Path:
    """
    Full pipeline: draw the identicon for *text* and save it as PNG.

    Args:
        text: Input string
        output_dir: Directory for the output file (created if missing)
        sanitize: Make the file name filesystem safe (see ImageService.output_name)
        hash_service: Digest used both for the pattern and for names that sanitize to nothing
        color_service, grid_service, pixel_map_service: Geometry stages
        image_service: Service for drawing, encoding and saving

    Returns:
        Path: Where the PNG was written.

    Raises:
        InvalidInput, RenderFailure, PersistenceFailure
    """
    image = draw_identicon(
        text,
        hash_service=hash_service,
        color_service=color_service,
        grid_service=grid_service,
        pixel_map_service=pixel_map_service,
        image_service=image_service,
    )
    image.path = image_service.output_path(
        text, hash_service.hexdigest(text), output_dir, sanitize=sanitize
    )
    return image_service.save(image)
