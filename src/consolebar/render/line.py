"""Line formatting and incremental terminal redraw.

The renderer never clears the line. It assumes the cursor sits right after
the previously rendered text, backs up to the first differing column with
backspaces, writes the new suffix, and blanks whatever is left of a longer
previous line:

    previous  [####....] 20.0% |
    next      [####....] 20.0% /
    emitted   "\b/"
"""

from __future__ import annotations

from typing import Protocol

from consolebar.core.models import DEFAULT_WIDTH, ProgressSnapshot

BACKSPACE = "\b"
BLOCK = "#"
EMPTY = "."


class Sink(Protocol):
    def write(self, text: str) -> object: ...

    def flush(self) -> None: ...


def format_line(snapshot: ProgressSnapshot, glyph: str, width: int = DEFAULT_WIDTH) -> str:
    """Build ``[###.....] 15.0% annotation |`` from a progress snapshot."""
    fraction = snapshot.fraction
    blocks = int(min(max(fraction, 0.0), 1.0) * width)
    text = f"[{BLOCK * blocks}{EMPTY * (width - blocks)}] {fraction:.1%}"
    if snapshot.annotation and not snapshot.annotation.isspace():
        text += f" {snapshot.annotation}"
    return f"{text} {glyph}"


def common_prefix_length(previous: str, next_text: str) -> int:
    limit = min(len(previous), len(next_text))
    n = 0
    while n < limit and previous[n] == next_text[n]:
        n += 1
    return n


def diff(previous: str, next_text: str) -> str:
    """Return the backspace/overwrite/pad sequence turning *previous* into *next_text*."""
    prefix = common_prefix_length(previous, next_text)

    parts = [BACKSPACE * (len(previous) - prefix), next_text[prefix:]]

    overlap = len(previous) - len(next_text)
    if overlap > 0:
        parts.append(" " * overlap)
        parts.append(BACKSPACE * overlap)

    return "".join(parts)


class LineRenderer:
    """Writes diffs to *sink* and remembers what is visible on the line."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self._previous = ""

    @property
    def previous(self) -> str:
        return self._previous

    def render(self, next_text: str) -> str:
        """Emit the edit from the visible line to *next_text*; return what was written."""
        output = diff(self._previous, next_text)
        if output:
            self._sink.write(output)
            self._sink.flush()
        self._previous = next_text
        return output
