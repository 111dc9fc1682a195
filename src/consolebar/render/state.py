"""Progress state written by producers and the spinner cursor read by ticks."""

from __future__ import annotations

from consolebar.core.errors import InvalidOperationError, OutOfRangeError
from consolebar.core.models import DEFAULT_GLYPHS, ProgressSnapshot


class _Keep:
    """Default for *text*: leave the current annotation as it is."""

    def __repr__(self) -> str:
        return "KEEP"


KEEP = _Keep()


class ProgressState:
    """Last-write-wins holder for the reported fraction and annotation.

    Each field is replaced by a single attribute assignment, so producers need
    no lock. A tick may observe a new annotation paired with the previous
    fraction; callers must not rely on the pair being consistent.

    *text* defaults to KEEP; passing None clears the annotation.
    """

    def __init__(self) -> None:
        self._fraction: float = 0.0
        self._annotation: str | None = None

    def report(self, fraction: float, text: str | None | _Keep = KEEP) -> None:
        # NaN fails this comparison too; negative values are accepted.
        if not fraction <= 1.0:
            raise OutOfRangeError(
                "fraction", fraction, "Progress must be a decimal between [0..1]"
            )
        if text is not KEEP:
            self._annotation = text
        self._fraction = float(fraction)

    def report_index(
        self, index: int, total: int, text: str | None | _Keep = KEEP,
    ) -> None:
        if total == 0:
            raise InvalidOperationError(
                "Total must be defined at construction to report by index."
            )
        if index > total:
            raise OutOfRangeError(
                "index", index, "Index must be less than or equal to total"
            )
        self.report(index / total, text)

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(fraction=self._fraction, annotation=self._annotation)


class AnimationCursor:
    """Cyclic index into the spinner glyphs; written only by the tick thread."""

    def __init__(self, glyphs: str = DEFAULT_GLYPHS) -> None:
        if not glyphs:
            raise ValueError("glyphs must contain at least one character")
        self.glyphs = glyphs
        self.index = 0

    def advance(self) -> str:
        """Return the current glyph and move to the next one."""
        glyph = self.glyphs[self.index]
        self.index += 1
        if self.index >= len(self.glyphs):
            self.index = 0
        return glyph
