import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# ─── Geometry (fixed) ─────────────────────────────────────────────
GRID_WIDTH = 5                              # cells per row
GROUP_SIZE = 3                              # hash bytes per mirrored row
CELL_SIZE = 50                              # pixels per cell side
CANVAS_SIZE = GRID_WIDTH * CELL_SIZE        # 250 x 250
BACKGROUND_COLOR = (255, 255, 255)

# ─── Hashing / output format (fixed) ──────────────────────────────
HASH_ALGORITHM = "md5"
HASH_SIZE = 16                              # bytes; 5 rows of 3 plus one unused
OUTPUT_IMG_EXT = ".png"

# ─── env-vars ─────────────────────────────────────────────────────
OUTPUT_DIR = os.getenv("IDENTICON_OUTPUT_DIR", ".")
SANITIZE_FILENAMES = os.getenv("IDENTICON_SANITIZE_FILENAMES", "true").strip().lower() in {"1", "true", "yes", "on"}
LOG_LEVEL = os.getenv("IDENTICON_LOG_LEVEL", "INFO").upper()
