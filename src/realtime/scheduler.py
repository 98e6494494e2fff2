"""
Rock Paper Scissors - Delayed Score Scheduling

A winning round is scored a fixed delay after the reveal. Increments are
not fired from independent timers: every increment goes through one FIFO
queue drained by a single writer, so round N always lands before round
N+1 and none can be lost or applied twice. Each increment carries the
match epoch it was earned in; the receiver drops it if the match has
been restarted since.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreIncrement:
    """A +1 owed to the score of the given match epoch."""

    epoch: int
    round_number: int


ScoreCallback = Callable[[ScoreIncrement], None]


class ScoreScheduler(Protocol):
    """Delivers scheduled increments, in scheduling order, to one callback."""

    def bind(self, callback: ScoreCallback) -> None:
        ...

    def schedule(self, increment: ScoreIncrement, delay: float) -> None:
        ...

    def pending(self) -> int:
        ...

    def shutdown(self) -> None:
        ...


class ThreadedScoreScheduler:
    """Single daemon worker draining a FIFO of due increments.

    The worker is started lazily on the first ``schedule`` call and exits
    once the queue has been empty for ``idle_timeout`` seconds, so an
    abandoned scheduler does not hold a thread. It sleeps on a stop event
    until the head of the queue is due, so ``shutdown`` interrupts it
    immediately. Callbacks run on the worker thread and callers must
    handle thread safety.
    """

    def __init__(self, name: str = "score-worker", idle_timeout: float = 5.0) -> None:
        self._name = name
        self._idle_timeout = idle_timeout
        self._queue: queue.Queue[tuple[float, ScoreIncrement] | None] = queue.Queue()
        self._callback: ScoreCallback | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._pending = 0

    def bind(self, callback: ScoreCallback) -> None:
        """Set the function that receives due increments."""
        self._callback = callback

    def schedule(self, increment: ScoreIncrement, delay: float) -> None:
        """Queue ``increment`` for delivery ``delay`` seconds from now."""
        if self._stop_event.is_set():
            raise RuntimeError("Score scheduler has been shut down.")

        due = time.monotonic() + max(delay, 0.0)
        with self._lock:
            self._pending += 1
            self._ensure_worker()
        self._queue.put((due, increment))
        logger.debug(
            "Scheduled score increment for epoch %d round %d in %.2fs",
            increment.epoch, increment.round_number, delay,
        )

    def pending(self) -> int:
        """Number of increments queued but not yet delivered."""
        with self._lock:
            return self._pending

    @property
    def is_running(self) -> bool:
        """True while a worker thread is alive."""
        with self._lock:
            return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: float | None = None) -> bool:
        """Block until every queued increment has been delivered.

        Returns:
            True if the queue drained, False on timeout.
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)

    def shutdown(self) -> None:
        """Stop the worker. Undelivered increments are dropped."""
        self._stop_event.set()
        self._queue.put(None)
        with self._idle:
            self._pending = 0
            self._idle.notify_all()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        logger.debug("Score scheduler %s stopped", self._name)

    # -- Worker ----------------------------------------------------------

    def _ensure_worker(self) -> None:
        """Start the worker thread if not running. Caller holds the lock."""
        if self._thread is None or not self._thread.is_alive():
            self._thread = threading.Thread(
                target=self._run, daemon=True, name=self._name
            )
            self._thread.start()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                item = self._queue.get(timeout=self._idle_timeout)
            except queue.Empty:
                with self._lock:
                    if self._pending == 0:
                        self._thread = None
                        logger.debug("Score scheduler %s idle, worker exiting", self._name)
                        return
                continue
            if item is None:
                return

            due, increment = item
            remaining = due - time.monotonic()
            if remaining > 0 and self._stop_event.wait(remaining):
                return

            self._deliver(increment)

    def _deliver(self, increment: ScoreIncrement) -> None:
        try:
            if self._callback is None:
                logger.warning(
                    "Dropping score increment for round %d: no callback bound",
                    increment.round_number,
                )
            else:
                self._callback(increment)
        except Exception:
            logger.exception(
                "Error delivering score increment for round %d", increment.round_number
            )
        finally:
            with self._idle:
                self._pending = max(self._pending - 1, 0)
                self._idle.notify_all()


class ManualScoreScheduler:
    """Scheduler driven by an explicit clock.

    Nothing is delivered until ``tick`` moves the clock past an
    increment's due time. Delivery happens on the caller's thread,
    in scheduling order.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: deque[tuple[float, ScoreIncrement]] = deque()
        self._callback: ScoreCallback | None = None
        self._closed = False

    def bind(self, callback: ScoreCallback) -> None:
        self._callback = callback

    def schedule(self, increment: ScoreIncrement, delay: float) -> None:
        if self._closed:
            raise RuntimeError("Score scheduler has been shut down.")
        self._queue.append((self.now + max(delay, 0.0), increment))

    def pending(self) -> int:
        return len(self._queue)

    def tick(self, seconds: float) -> int:
        """Advance the clock and deliver what became due.

        Returns:
            Number of increments delivered.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards by {seconds}s.")
        self.now += seconds
        delivered = 0
        while self._queue and self._queue[0][0] <= self.now:
            _, increment = self._queue.popleft()
            self._deliver(increment)
            delivered += 1
        return delivered

    def flush(self) -> int:
        """Deliver everything pending, moving the clock to the last due time."""
        if not self._queue:
            return 0
        last_due = max(due for due, _ in self._queue)
        return self.tick(max(last_due - self.now, 0.0))

    def shutdown(self) -> None:
        self._closed = True
        self._queue.clear()

    def _deliver(self, increment: ScoreIncrement) -> None:
        if self._callback is None:
            logger.warning(
                "Dropping score increment for round %d: no callback bound",
                increment.round_number,
            )
            return
        try:
            self._callback(increment)
        except Exception:
            logger.exception(
                "Error delivering score increment for round %d", increment.round_number
            )
