from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class Stopwatch:
    """Elapsed seconds over a monotonic clock; frozen once stopped."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.clock = clock
        self._start: Optional[float] = None
        self._stop: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._start is not None and self._stop is None

    def start(self) -> None:
        self._start = self.clock()
        self._stop = None

    def stop(self) -> None:
        if self.running:
            self._stop = self.clock()

    def reset(self) -> None:
        self._start = None
        self._stop = None

    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else self.clock()
        return max(0.0, end - self._start)


class Ticker:
    """Calls ``on_tick(elapsed)`` every ``interval`` seconds from a daemon thread.

    Purely observational: the callback only receives the stopwatch reading.
    """

    def __init__(
        self,
        stopwatch: Stopwatch,
        on_tick: Callable[[float], None],
        interval: float = 0.1,
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.stopwatch = stopwatch
        self.on_tick = on_tick
        self.interval = interval
        self._halt = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        self.stop()
        self._halt = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._halt,), name="lightsgame-ticker", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._halt.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.interval * 5)

    def _run(self, halt: threading.Event) -> None:
        while not halt.wait(self.interval):
            self.on_tick(self.stopwatch.elapsed())
