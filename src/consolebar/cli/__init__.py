"""CLI entry point — Click command group."""

from __future__ import annotations

import logging
import sys

import click

from consolebar import __version__


def _quick_start(root_name: str) -> str:
    lines = [
        "Quick start:",
        f"  {root_name} demo --total 200 --workers 4",
        f"  {root_name} config init",
        f"  {root_name} config show",
    ]
    return "\n".join(lines)


def _render_full_index(root: click.Command, root_name: str) -> str:
    lines: list[str] = []

    def _walk(cmd: click.Command, prefix: str) -> None:
        lines.append(prefix)
        if isinstance(cmd, click.Group):
            for child_name in sorted(cmd.commands):
                _walk(cmd.commands[child_name], f"{prefix} {child_name}")

    _walk(root, root_name)
    return "\n".join(f"  {line}" for line in lines)


def _help_with_index(base: str, ctx: click.Context) -> str:
    root_ctx = ctx.find_root()
    root_name = root_ctx.info_name or "consolebar"
    full = _render_full_index(root_ctx.command, root_name)
    return f"{base}\n\n{_quick_start(root_name)}\n\nCommand index:\n{full}"


class ConsoleBarCommand(click.Command):
    """Click command that appends the command index to help output."""

    def get_help(self, ctx: click.Context) -> str:
        return _help_with_index(super().get_help(ctx), ctx)


class ConsoleBarGroup(click.Group):
    """Click group that appends the command index to help output."""

    command_class = ConsoleBarCommand
    group_class = type

    def get_help(self, ctx: click.Context) -> str:
        return _help_with_index(super().get_help(ctx), ctx)


@click.group(cls=ConsoleBarGroup, name="consolebar")
@click.version_option(__version__, prog_name="consolebar")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """consolebar — self-updating ASCII progress bar for terminals."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register all sub-commands on import
from consolebar.cli import commands as _commands  # noqa: F401, E402
