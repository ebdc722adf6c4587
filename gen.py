# Generate the board background and a wood texture
#
# Defaults reproduce the standard assets:
# - board.png: 100 px per square -> 1276x1929
# - wood.png: 80x80 rings, centred (no offset jitter)
#
# The 100 px board can be served from a precomputed PNG (--fallback) instead
# of being redrawn; any other scale is always rendered.
#
import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from PIL import Image

from cerke_bg import SynthesisError, render_board, render_wood

logger = logging.getLogger("gen")

FALLBACK_SQUARE_SIZE = 100.0


def load_board(square_size, fallback=None, workers=1):
    """Board image, taken from ``fallback`` when it was made for this scale."""
    if fallback is not None and square_size == FALLBACK_SQUARE_SIZE:
        fallback = Path(fallback)
        if fallback.is_file():
            logger.info("using precomputed board %s", fallback)
            with Image.open(fallback) as img:
                return img.convert("RGB")
        logger.warning("fallback %s not found, rendering instead", fallback)
    return render_board(square_size, workers=workers)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render the board background and a wood-grain texture",
    )
    parser.add_argument("--square-size", type=float, default=FALLBACK_SQUARE_SIZE,
                        help="pixels per board square (default: 100)")
    parser.add_argument("--wood-size", type=int, nargs=2, metavar=("W", "H"), default=(80, 80),
                        help="wood texture size in pixels (default: 80 80)")
    parser.add_argument("--offset-stddev", type=float, default=0.0,
                        help="spread of the random ring-centre offset in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the wood texture (default: fresh entropy)")
    parser.add_argument("--fallback", type=Path, default=None,
                        help="precomputed board PNG used for --square-size 100")
    parser.add_argument("--out-dir", type=Path, default=Path("images"))
    parser.add_argument("--workers", type=int, default=1,
                        help="threads per image (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        board = load_board(args.square_size, args.fallback, workers=args.workers)
        width, height = args.wood_size
        wood = render_wood(width, height, args.offset_stddev,
                           rng=np.random.default_rng(args.seed), workers=args.workers)
    except SynthesisError as exc:
        logger.error("%s", exc)
        return 2

    args.out_dir.mkdir(parents=True, exist_ok=True)
    board_path = args.out_dir / "board.png"
    wood_path = args.out_dir / "wood.png"
    board.save(board_path)
    wood.save(wood_path)
    logger.info("wrote %s (%dx%d)", board_path, *board.size)
    logger.info("wrote %s (%dx%d)", wood_path, *wood.size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
