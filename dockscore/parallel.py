"""Running work across threads, with a shared text progress bar."""

from __future__ import annotations

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, MutableSequence, Optional, TextIO, TypeVar

T = TypeVar("T")

_TICS = 50
_SCALE = "0%   10   20   30   40   50   60   70   80   90   100%\n"
_RULER = "|----|----|----|----|----|----|----|----|----|----|\n"


class ParallelProgress:
    """A thread-safe progress bar of asterisks drawn under a percent scale.

    Incrementing before :meth:`init` has been called does nothing.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._out: Optional[TextIO] = None
        self._lock = threading.Lock()
        self._expected = 1
        self._count = 0
        self._tic = 0
        self._next_tic_count = 0

    @property
    def count(self) -> int:
        return self._count

    def init(self, n: int) -> None:
        """Start a bar for ``n`` expected increments and draw its scale."""
        with self._lock:
            self._out = self._stream if self._stream is not None else sys.stdout
            self._expected = n if n > 0 else 1
            self._count = 0
            self._tic = 0
            self._next_tic_count = 0
            self._out.write("\n" + _SCALE + _RULER)
            self._out.flush()

    def increment(self) -> None:
        if self._out is None:
            return
        with self._lock:
            self._count += 1
            if self._count >= self._next_tic_count:
                self._display_tic()

    def _display_tic(self) -> None:
        out = self._out
        assert out is not None
        tics_needed = int(self._count / self._expected * _TICS)
        while True:
            out.write("*")
            self._tic += 1
            if self._tic >= tics_needed:
                break
        self._next_tic_count = int(self._tic / _TICS * self._expected)
        if self._count == self._expected:
            if self._tic <= _TICS:
                out.write("*")
            out.write("\n")
        out.flush()


def parallel_for(f: Callable[[int], object], size: int, num_threads: int) -> None:
    """Call ``f(i)`` for every ``i`` in ``range(size)`` on ``num_threads`` threads.

    Indexes are handed out one at a time to whichever thread is free. The
    first exception raised by ``f`` stops further work and is re-raised.
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")
    if size <= 0:
        return

    lock = threading.Lock()
    indices = iter(range(size))
    failed = threading.Event()

    def worker() -> None:
        while not failed.is_set():
            with lock:
                i = next(indices, None)
            if i is None:
                return
            try:
                f(i)
            except BaseException:
                failed.set()
                raise

    workers = min(num_threads, size)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(worker) for _ in range(workers)]
    for future in futures:
        future.result()


def parallel_iter(
    f: Callable[[T], object], items: MutableSequence[T], num_threads: int
) -> None:
    """Call ``f`` on every element of ``items`` on ``num_threads`` threads."""
    parallel_for(lambda i: f(items[i]), len(items), num_threads)