"""Row-band fan-out for per-pixel fills.

Every pixel is a pure function of read-only inputs, so an image can be cut
into horizontal bands and each band computed independently. Bands are
concatenated back in row order, which makes the result identical whatever
the worker count.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .errors import SynthesisError

logger = logging.getLogger(__name__)


def row_bands(height, workers):
    """Split ``range(height)`` into at most ``workers`` contiguous (start, stop) pairs."""
    n = max(1, min(workers, height))
    step, extra = divmod(height, n)
    bands = []
    start = 0
    for i in range(n):
        stop = start + step + (1 if i < extra else 0)
        bands.append((start, stop))
        start = stop
    return bands


def map_row_bands(height, workers, fn):
    """Run ``fn(start, stop)`` over row bands and stack the returned rows."""
    if workers < 1:
        raise SynthesisError(f"workers must be at least 1, got {workers}")

    bands = row_bands(height, workers)
    if len(bands) == 1:
        return fn(0, height)

    logger.debug("filling %d rows in %d bands", height, len(bands))
    with ThreadPoolExecutor(max_workers=len(bands)) as pool:
        parts = list(pool.map(lambda band: fn(*band), bands))
    return np.concatenate(parts, axis=0)
