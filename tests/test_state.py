import math
import threading

import pytest

from consolebar.core.errors import ConsoleBarError, InvalidOperationError, OutOfRangeError
from consolebar.render.state import AnimationCursor, ProgressState


def test_report_replaces_fraction_only():
    state = ProgressState()
    state.report(0.25, "loading")
    state.report(0.5)
    snap = state.snapshot()
    assert snap.fraction == 0.5
    assert snap.annotation == "loading"


def test_report_above_one_fails_and_keeps_state():
    state = ProgressState()
    state.report(0.4, "before")
    with pytest.raises(OutOfRangeError) as exc_info:
        state.report(1.5, "after")
    assert exc_info.value.name == "fraction"
    assert exc_info.value.value == 1.5
    assert state.snapshot().fraction == 0.4
    assert state.snapshot().annotation == "before"


def test_none_text_clears_annotation():
    state = ProgressState()
    state.report(0.5, "copying")
    state.report(0.6, None)
    assert state.snapshot().annotation is None

    state.report_index(3, 4, "again")
    state.report_index(4, 4)
    assert state.snapshot().annotation == "again"
    state.report_index(4, 4, None)
    assert state.snapshot().annotation is None


def test_report_nan_fails():
    with pytest.raises(OutOfRangeError):
        ProgressState().report(math.nan)


def test_negative_fraction_is_accepted():
    state = ProgressState()
    state.report(-0.5)
    assert state.snapshot().fraction == -0.5


def test_index_requires_total():
    with pytest.raises(InvalidOperationError):
        ProgressState().report_index(3, 0)


def test_index_above_total_fails():
    state = ProgressState()
    with pytest.raises(OutOfRangeError) as exc_info:
        state.report_index(11, 10)
    assert exc_info.value.name == "index"
    assert state.snapshot().fraction == 0.0


def test_index_equal_to_total_is_complete():
    state = ProgressState()
    state.report_index(10, 10, "all done")
    assert state.snapshot().fraction == 1.0
    assert state.snapshot().annotation == "all done"


def test_errors_share_base_and_builtin_types():
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(InvalidOperationError, RuntimeError)
    assert issubclass(OutOfRangeError, ConsoleBarError)


def test_concurrent_reports_leave_a_written_value():
    state = ProgressState()
    values = [i / 100 for i in range(100)]

    def _producer(chunk):
        for v in chunk:
            state.report(v, f"v={v}")

    threads = [threading.Thread(target=_producer, args=(values[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snap = state.snapshot()
    assert snap.fraction in values
    assert snap.annotation.startswith("v=")


def test_cursor_cycles_glyphs():
    cursor = AnimationCursor("|/-\\")
    assert [cursor.advance() for _ in range(6)] == ["|", "/", "-", "\\", "|", "/"]
    assert cursor.index == 2


def test_cursor_rejects_empty_glyphs():
    with pytest.raises(ValueError):
        AnimationCursor("")
