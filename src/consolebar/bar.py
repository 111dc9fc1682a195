"""ProgressBar — the public entry point.

Typical use from a worker loop::

    with ProgressBar(total=len(items)) as bar:
        for i, item in enumerate(items, 1):
            process(item)
            bar.report(i, item.name)

Producers only call ``report``; the bar's own ticker thread owns the
terminal line until ``dispose`` erases it.
"""

from __future__ import annotations

import logging
import numbers
import sys
from typing import TextIO

from consolebar.core.models import BarSettings, SchedulerState
from consolebar.render.line import LineRenderer, format_line
from consolebar.render.scheduler import TickScheduler
from consolebar.render.state import KEEP, AnimationCursor, ProgressState, _Keep

logger = logging.getLogger(__name__)


class ProgressBar:
    """Single-line ASCII progress bar redrawn in place on a terminal.

    When *stream* is not an interactive terminal (output redirected to a file
    or a pipe) nothing is ever written; reports are still validated.
    """

    def __init__(
        self,
        total: int = 0,
        *,
        stream: TextIO | None = None,
        settings: BarSettings | None = None,
        interactive: bool | None = None,
    ) -> None:
        self.settings = (settings or BarSettings()).validate()
        self._total = total
        self._stream = stream if stream is not None else _default_stream(self.settings)
        if interactive is None:
            interactive = _is_interactive(self._stream)

        self._state = ProgressState()
        self._cursor = AnimationCursor(self.settings.glyphs)
        self._renderer = LineRenderer(self._stream)
        self._scheduler = TickScheduler(
            self._render_tick,
            self._render_final,
            interval=self.settings.interval,
            interactive=interactive,
        )
        logger.debug("Progress bar created (total=%d, interactive=%s)", total, interactive)
        self._scheduler.start()

    # ── reporting ───────────────────────────────────────────────────

    def report(self, value: float, text: str | None | _Keep = KEEP) -> None:
        """Report progress.

        Integers are item indexes (``index / total``) and require *total*;
        any other number is a fraction in ``[0..1]``. *text*, when given,
        replaces the annotation shown after the percentage; None clears it.
        """
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            self.report_index(int(value), text)
        else:
            self.report_fraction(value, text)

    def report_fraction(self, fraction: float, text: str | None | _Keep = KEEP) -> None:
        self._state.report(fraction, text)

    def report_index(self, index: int, text: str | None | _Keep = KEEP) -> None:
        self._state.report_index(index, self._total, text)

    # ── lifecycle ───────────────────────────────────────────────────

    @property
    def total(self) -> int:
        return self._total

    @property
    def state(self) -> SchedulerState:
        return self._scheduler.state

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def disposed(self) -> bool:
        return self._scheduler.state is SchedulerState.DISPOSED

    def dispose(self) -> None:
        """Stop the ticker and erase the bar. Safe to call more than once."""
        self._scheduler.dispose()

    close = dispose

    def __enter__(self) -> "ProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ── render steps (called under the scheduler lock) ─────────────

    def _render_tick(self) -> None:
        glyph = self._cursor.advance()
        line = format_line(self._state.snapshot(), glyph, self.settings.width)
        self._renderer.render(line)

    def _render_final(self) -> None:
        self._renderer.render("")


def _default_stream(settings: BarSettings) -> TextIO:
    return sys.stderr if settings.stream == "stderr" else sys.stdout


def _is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False
