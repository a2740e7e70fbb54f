"""
Telemetry feed: one ticking source fanned out to every subscriber.

All consumers of a feed observe the same snapshot instance per tick. The
generator behind it is swappable (mock today, live car data later).
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Protocol

from solar_telemetry.snapshot import TelemetrySnapshot

logger = logging.getLogger(__name__)

Subscriber = Callable[[TelemetrySnapshot], None]


class SnapshotSource(Protocol):
    def generate(self) -> TelemetrySnapshot: ...


class TelemetryFeed:
    def __init__(self, source: SnapshotSource, interval: float = 2.0):
        if interval <= 0:
            raise ValueError("TelemetryFeed interval must be > 0")
        self._source = source
        self._interval = interval
        self._lock = threading.Lock()
        self._subscribers: List[Subscriber] = []
        self._latest: Optional[TelemetrySnapshot] = None
        self._ticks = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def latest(self) -> Optional[TelemetrySnapshot]:
        with self._lock:
            return self._latest

    @property
    def ticks(self) -> int:
        with self._lock:
            return self._ticks

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a consumer; the returned callable removes it again."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def tick(self) -> TelemetrySnapshot:
        snapshot = self._source.generate()

        with self._lock:
            self._latest = snapshot
            self._ticks += 1
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception:
                logger.exception(
                    "Telemetry subscriber failed.",
                    extra={"event": "telemetry.subscriber_error", "subscriber": repr(callback)},
                )

        return snapshot

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="telemetry-feed", daemon=True)
        self._thread.start()
        logger.info(
            "Telemetry feed started.",
            extra={"event": "telemetry.feed_started", "interval_s": self._interval},
        )

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Telemetry feed stopped.", extra={"event": "telemetry.feed_stopped"})

    def _run(self) -> None:
        # first snapshot immediately, then once per interval
        while not self._stop.is_set():
            self.tick()
            if self._stop.wait(self._interval):
                break
