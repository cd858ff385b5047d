"""
Background rendering for text that keeps changing (e.g. while someone types).

Each `submit` schedules a pipeline run on a worker thread. Runs never share
state, so the only coordination needed is deciding which result to show:
only the output of the most recently submitted text is passed to the
callback. A newer submission cancels the previous one if it has not started
yet; results of older runs that did start are dropped.
"""
from __future__ import annotations

import concurrent.futures as cf
import threading
from typing import Callable, Optional

from pipeline import render


class LiveRenderer:
    def __init__(self, on_result: Optional[Callable[[str], None]] = None, max_workers: int = 1):
        self.on_result = on_result
        self.latest: Optional[str] = None
        self._seq = 0
        self._pending: Optional[cf.Future] = None
        # _seq_lock guards _seq/_pending/latest and is never held while calling out.
        self._seq_lock = threading.Lock()
        # _deliver_lock keeps callbacks in submission order; submit never takes it.
        self._deliver_lock = threading.Lock()
        self._pool = cf.ThreadPoolExecutor(max_workers=max_workers)

    def submit(self, text: str) -> cf.Future:
        with self._seq_lock:
            self._seq += 1
            if self._pending is not None:
                self._pending.cancel()
            future = self._pool.submit(self._run, self._seq, text)
            self._pending = future
        return future

    def _run(self, seq: int, text: str) -> str:
        out = render(text)
        with self._deliver_lock:
            with self._seq_lock:
                if seq != self._seq:
                    return out
                self.latest = out
            if self.on_result is not None:
                self.on_result(out)
        return out

    def close(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)

    def __enter__(self) -> "LiveRenderer":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
