"""desktools package: desktop helper subcommands."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from . import nixos, screenshot, scrollback


@dataclass(frozen=True)
class ScriptCommand:
    """Declarative CLI registration entry for a desktools subcommand."""

    name: str
    app: typer.Typer
    invoke_without_command: bool = False


SCRIPT_COMMANDS: tuple[ScriptCommand, ...] = (
    ScriptCommand(name="nixos", app=nixos.app, invoke_without_command=True),
    ScriptCommand(name="scrollback", app=scrollback.app, invoke_without_command=True),
    ScriptCommand(name="screenshot", app=screenshot.app, invoke_without_command=False),
)


__all__ = [
    "nixos",
    "screenshot",
    "scrollback",
    "ScriptCommand",
    "SCRIPT_COMMANDS",
]
