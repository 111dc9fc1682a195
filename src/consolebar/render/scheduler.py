"""Periodic redraw driven by an owned background thread."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from consolebar.core.models import DEFAULT_INTERVAL, SchedulerState

logger = logging.getLogger(__name__)


class TickScheduler:
    """Runs *on_tick* every *interval* seconds until disposed.

    The wait for the next tick starts only after the previous one returned,
    so slow writes stretch the cadence instead of queueing ticks. A tick and
    the disposal step hold the same lock; the disposed check happens inside
    it, so no tick can write after *on_dispose* ran.
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        on_dispose: Callable[[], None],
        *,
        interval: float = DEFAULT_INTERVAL,
        interactive: bool = True,
    ) -> None:
        if not interval > 0:
            raise ValueError(f"interval must be > 0, got {interval!r}")
        self.interval = interval
        self.interactive = interactive
        self._on_tick = on_tick
        self._on_dispose = on_dispose
        self._lock = threading.Lock()
        self._wake = threading.Event()
        self._thread: threading.Thread | None = None
        self._state = SchedulerState.IDLE

    @property
    def state(self) -> SchedulerState:
        return self._state

    def start(self) -> None:
        """Arm the first tick. Non-interactive schedulers stay idle for good."""
        if not self.interactive:
            logger.debug("Output is not a terminal; progress bar stays idle")
            return

        with self._lock:
            if self._state is not SchedulerState.IDLE:
                return
            self._state = SchedulerState.SCHEDULED
            self._thread = threading.Thread(
                target=self._run, name="consolebar-ticker", daemon=True,
            )
            self._thread.start()
        logger.debug("Tick scheduler started (interval=%.3fs)", self.interval)

    def tick(self) -> bool:
        """Run one render step. Returns False when no more ticks should follow.

        A render error moves the scheduler to STOPPED and is re-raised; only
        dispose() is allowed afterwards.
        """
        with self._lock:
            if self._state is not SchedulerState.SCHEDULED:
                return False
            self._state = SchedulerState.RENDERING
            try:
                self._on_tick()
            except Exception:
                # no tick is pending after a failed render
                self._state = SchedulerState.STOPPED
                self._wake.set()
                raise
            self._state = SchedulerState.SCHEDULED
            return True

    def dispose(self) -> None:
        """Stop ticking, run the final *on_dispose* step, and join the thread."""
        with self._lock:
            if self._state is SchedulerState.DISPOSED:
                return
            self._state = SchedulerState.DISPOSED
            try:
                self._on_dispose()
            finally:
                self._wake.set()

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("Tick scheduler disposed")

    def _run(self) -> None:
        while not self._wake.wait(self.interval):
            try:
                if not self.tick():
                    break
            except Exception:
                logger.exception("Progress bar render failed, stopping ticks")
                break
