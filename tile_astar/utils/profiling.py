"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from pathlib import Path
from typing import Callable


logger = logging.getLogger(__name__)


def profile_searches(
    n: int,
    search_callback: Callable[[], object],
    out_path: str | Path = "search.prof",
) -> pstats.Stats:
    """Profile ``search_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of times to run the callback.
    search_callback:
        Function performing one search request.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    started = time.perf_counter()
    profiler.enable()
    for _ in range(n):
        search_callback()
    profiler.disable()
    elapsed = time.perf_counter() - started
    profiler.dump_stats(str(path))
    if n:
        logger.info("[Profile] %s searches in %.3fs (avg %.2f ms)", n, elapsed, elapsed * 1000 / n)
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
