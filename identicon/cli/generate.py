import argparse
import logging
import sys
from typing import List, Optional

from ..config import LOG_LEVEL, OUTPUT_DIR, SANITIZE_FILENAMES
from ..errors import IdenticonError
from ..pipeline.identicon_pipeline import generate_identicon

logger = logging.getLogger(__name__)


def resolve_log_level(name: str) -> int:
    """Map a level name such as "DEBUG" to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="identicon",
        description="Generate a 250x250 PNG identicon for each input string.",
    )
    ap.add_argument("inputs", nargs="+", metavar="INPUT",
                    help="string(s) to turn into identicons")
    ap.add_argument("-o", "--output-dir", default=OUTPUT_DIR,
                    help="directory to write <INPUT>.png files into (default: %(default)s)")
    ap.add_argument("--raw-names", action="store_true", default=not SANITIZE_FILENAMES,
                    help="use INPUT verbatim as the file name (unsafe for paths)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log every pipeline stage")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else resolve_log_level(LOG_LEVEL),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    failures = 0
    for text in args.inputs:
        try:
            path = generate_identicon(text, args.output_dir, sanitize=not args.raw_names)
        except IdenticonError as err:
            failures += 1
            logger.error(f"Failed to generate identicon for {text!r}: {err}")
            continue
        print(path)

    if failures:
        logger.error(f"{failures}/{len(args.inputs)} identicon(s) failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
