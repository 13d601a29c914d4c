"""Per-cache-directory mutual exclusion.

Two in-flight extractions into the same cache directory would corrupt each
other's frame set, so the runner holds one lock per path digest for the
whole decode/collect span. Only callers within this process are serialized.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
# entries vanish once no caller holds or waits on the lock
_locks: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()


def get_lock(key: str) -> threading.Lock:
    with _registry_lock:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.Lock()
        return lock


@contextmanager
def cache_lock(digest: str) -> Iterator[None]:
    """Hold the lock for one cache directory."""
    lock = get_lock(digest)
    if not lock.acquire(blocking=False):
        logger.info(f"Waiting for another extraction on {digest[:12]}...")
        lock.acquire()
    try:
        yield
    finally:
        lock.release()
