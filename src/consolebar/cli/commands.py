"""CLI commands — demo, config init, config show."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click

from consolebar.bar import ProgressBar
from consolebar.cli import cli
from consolebar.core import paths
from consolebar.core.errors import ConsoleBarError
from consolebar.core.models import BarSettings
from consolebar.repo import config


# ── demo ────────────────────────────────────────────────────────────


@cli.command()
@click.option("--total", default=100, show_default=True, help="Number of work items.")
@click.option("--workers", default=4, show_default=True, help="Producer threads.")
@click.option(
    "--delay", default=0.02, show_default=True, type=float,
    help="Simulated seconds of work per item.",
)
@click.option("--label", default="item", show_default=True, help="Annotation prefix.")
@click.option(
    "--path", "root", default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory used to resolve consolebar.toml.",
)
def demo(total: int, workers: int, delay: float, label: str, root: str) -> None:
    """Run simulated work on several threads behind a live progress bar.

    The bar only draws when its stream is an interactive terminal.
    """
    if total < 1:
        raise click.ClickException("--total must be >= 1")
    if workers < 1:
        raise click.ClickException("--workers must be >= 1")

    settings = _load_settings(Path(root))

    done = 0
    done_mutex = threading.Lock()

    def _work(item: int) -> None:
        nonlocal done
        time.sleep(delay)
        with done_mutex:
            done += 1
            # report under the counter lock so the bar never moves backwards
            bar.report(done, f"{label} {item + 1}")

    t0 = time.monotonic()
    try:
        with ProgressBar(total, settings=settings) as bar:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                for future in [pool.submit(_work, i) for i in range(total)]:
                    future.result()
    except ConsoleBarError as exc:
        raise click.ClickException(str(exc)) from exc
    dt = time.monotonic() - t0

    click.echo(f"✔ Processed {done} {label}(s) on {workers} thread(s) in {dt:.1f}s")


# ── config ──────────────────────────────────────────────────────────


@cli.group("config")
def config_group() -> None:
    """Inspect or create consolebar.toml."""


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing consolebar.toml.")
@click.option(
    "--path", "root", default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory to write consolebar.toml into.",
)
def config_init(force: bool, root: str) -> None:
    """Write a consolebar.toml with default settings."""
    target = Path(root) / paths.CONFIG_TOML
    if target.exists() and not force:
        raise click.ClickException(f"Config already exists: {target} (use --force)")

    config.save(BarSettings(), target)
    click.echo(f"✔ Wrote {target}")


@config_group.command("show")
@click.option(
    "--path", "root", default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory used to resolve consolebar.toml.",
)
def config_show(root: str) -> None:
    """Print the settings that apply in PATH and where they come from."""
    try:
        resolved = config.load_for(Path(root))
    except ConsoleBarError as exc:
        raise click.ClickException(str(exc)) from exc

    source = resolved.source or "built-in defaults"
    click.echo(f"Source: {source}")
    s = resolved.settings
    click.echo(f"  interval = {s.interval:g}")
    click.echo(f"  width    = {s.width}")
    click.echo(f"  glyphs   = {s.glyphs!r}")
    click.echo(f"  stream   = {s.stream}")


# ── helpers ─────────────────────────────────────────────────────────


def _load_settings(root: Path) -> BarSettings:
    try:
        return config.load_for(root).settings
    except ConsoleBarError as exc:
        raise click.ClickException(str(exc)) from exc
