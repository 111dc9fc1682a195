import io
import time

import pytest
from click.testing import CliRunner


class FakeTerminal(io.StringIO):
    """StringIO that claims to be a TTY and records every write."""

    def __init__(self, tty: bool = True):
        super().__init__()
        self.tty = tty
        self.writes: list[str] = []

    def isatty(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        return self.tty

    def write(self, s: str) -> int:
        self.writes.append(s)
        return super().write(s)


def replay(previous: str, emitted: str) -> tuple[str, int]:
    """Apply *emitted* to a one-line screen showing *previous* with the cursor
    at its end. Returns (screen contents, cursor column)."""
    screen = list(previous)
    col = len(screen)
    for ch in emitted:
        if ch == "\b":
            col = max(col - 1, 0)
            continue
        if col < len(screen):
            screen[col] = ch
        else:
            screen.append(ch)
        col += 1
    return "".join(screen), col


def wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def terminal():
    """Fake interactive terminal."""
    return FakeTerminal()


@pytest.fixture
def redirected():
    """Fake redirected output (not a TTY)."""
    return FakeTerminal(tty=False)


@pytest.fixture
def runner():
    """Click CLI runner fixture."""
    return CliRunner()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point user-level config lookups at an empty temp directory."""
    monkeypatch.delenv("CONSOLEBAR_CONFIG", raising=False)
    monkeypatch.setenv("CONSOLEBAR_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace
