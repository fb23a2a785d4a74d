"""A fixed-interval tick driver running on a background thread."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class GameLoop:
    """Calls a tick callback every ``interval_ms`` milliseconds while started."""

    def __init__(self, interval_ms: int = 16) -> None:
        self._interval_ms = 0
        self.interval_ms = interval_ms
        self._callback: Optional[Callable[[], None]] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("interval must not be negative")
        self._interval_ms = ms

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def set_tick_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._callback = callback

    def tick(self) -> None:
        """Run one tick immediately."""
        if self._callback is not None:
            self._callback()

    def start(self) -> None:
        if self.running:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval_ms / 1000.0):
            self.tick()

    def __enter__(self) -> GameLoop:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()