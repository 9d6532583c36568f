"""Storage service for the sliding window of readings (in-memory only)"""
import threading
import time
from collections import deque
from contextlib import contextmanager
from typing import Callable, List

from sensor_graph.config.logger import logger
from sensor_graph.models.schemas import WindowEntry


def epoch_seconds(clock: Callable[[], float] = time.time) -> int:
    """Whole seconds since the epoch, or 0 if the clock is unusable"""
    try:
        now = clock()
    except (OSError, OverflowError, ValueError) as e:
        logger.warning(f"Clock unavailable, using timestamp 0: {e}")
        return 0
    if now < 0:
        return 0
    return int(now)


class SlidingWindow:
    """
    Fixed-length FIFO of timestamped readings, oldest first.

    Every public method runs under a single lock. If a critical section
    fails half-way, the window is marked as faulted and the next caller
    repairs it instead of refusing service.
    """

    def __init__(self, capacity: int, default_value: float = 0.0):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._default_value = default_value
        self._entries: deque = deque(
            (self._placeholder(default_value) for _ in range(capacity)),
            maxlen=capacity,
        )
        self._lock = threading.Lock()
        self._faulted = False

    @staticmethod
    def _placeholder(value: float) -> WindowEntry:
        return WindowEntry(data=value, time=0)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._critical() as entries:
            return len(entries)

    @contextmanager
    def _critical(self):
        """Hold the lock, recovering from an earlier failed update first"""
        with self._lock:
            if self._faulted:
                self._repair()
            try:
                yield self._entries
            except Exception:
                self._faulted = True
                raise

    def _repair(self):
        # a reset that failed part-way leaves the window short
        missing = self._capacity - len(self._entries)
        logger.warning(f"Recovering sliding window after a failed update ({missing} slots refilled)")
        for _ in range(missing):
            self._entries.appendleft(self._placeholder(self._default_value))
        self._faulted = False

    def push(self, entry: WindowEntry) -> List[WindowEntry]:
        """Evict the oldest entry, append the new one and return the resulting window"""
        with self._critical() as entries:
            # maxlen drops the front entry on append
            entries.append(entry)
            return list(entries)

    def reset_all(self, default_value: float):
        """Replace every entry with a placeholder carrying default_value"""
        with self._critical() as entries:
            self._default_value = default_value
            entries.clear()
            for _ in range(self._capacity):
                entries.append(self._placeholder(default_value))

    def snapshot(self) -> List[WindowEntry]:
        """Ordered copy of the window, oldest first"""
        with self._critical() as entries:
            return list(entries)
