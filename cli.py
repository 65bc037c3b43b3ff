#!/usr/bin/env python3
"""desktools CLI entry point.

Aggregates the subcommands registered in desktools.SCRIPT_COMMANDS.

Subcommands:
    - nixos:      edit, rebuild, commit and push the NixOS flake
    - screenshot: grim screenshot -> file, clipboard and notification
    - scrollback: strip ANSI codes from piped scrollback and open an editor

Examples:
    desktools nixos --update                       # NH_FLAKE and DEVICE from env
    desktools nixos --open-editor --dry-run
    desktools screenshot window
    desktools screenshot region --slurp-fg '#ff8800aa' --slurp-bg '#00000066'
    kitty @ get-text --extent all | desktools scrollback --editor-name 'nvim -'
"""

from desktools import SCRIPT_COMMANDS
from desktools._cli_common import new_typer_app


# Root Typer app; expose -h/--help on all levels
app = new_typer_app(no_args_is_help=True)

# Mount sub-apps under their command names. With invoke_without_command=True,
# running, e.g., `desktools nixos` executes the nixos callback directly.
for command in SCRIPT_COMMANDS:
    app.add_typer(command.app, name=command.name, invoke_without_command=command.invoke_without_command)


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
