"""Run independent path requests on a thread pool."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..adapter.request import PathOutput, PathRequest, find_path
from ..config import CONFIG


logger = logging.getLogger(__name__)


def search_many(
    requests: Iterable[PathRequest], max_workers: Optional[int] = None
) -> List[PathOutput]:
    """Run every request and return the outputs in input order.

    Each request builds its own grid and heap, so no locking is needed.
    """

    pending = list(requests)
    if not pending:
        return []
    workers = max_workers if max_workers is not None else CONFIG.search.max_workers
    logger.debug("[Batch] Dispatching %s path requests (max_workers=%s)", len(pending), workers)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="PathSearch") as pool:
        return list(pool.map(find_path, pending))


__all__ = ["search_many"]
