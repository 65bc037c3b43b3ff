"""CLI: rebuild the NixOS configuration flake and push the change.

Runs, inside the flake directory:

    $EDITOR                       (only with --open-editor)
    git add .
    nh os switch -H <device> . [--update]
    git commit -am <message>
    git push

The first failing step stops the rest.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from ._cli_common import new_typer_app
from ._cli_output import fatal, info
from ._process import ScriptError, run_command, split_command


app = new_typer_app()

DEFAULT_COMMIT_MESSAGE = "update"


@app.callback(invoke_without_command=True)
def nixos(
    open_editor: bool = typer.Option(False, "--open-editor", help="Open the editor in the flake directory first"),
    editor_name: Optional[str] = typer.Option(None, "--editor-name", envvar="EDITOR", help="Editor command"),
    update: bool = typer.Option(False, "--update", help="Update flake inputs while switching (nh --update)"),
    flake: Path = typer.Option(
        ...,
        "--flake",
        envvar="NH_FLAKE",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Path to the NixOS configuration flake",
    ),
    device: str = typer.Option(..., "--device", envvar="DEVICE", help="Host name of the configuration to switch to"),
    message: str = typer.Option(DEFAULT_COMMIT_MESSAGE, "-m", "--message", help="Commit message"),
    dry_run: bool = typer.Option(False, "-n", "--dry-run", help="Show the commands without running them"),
):
    """Edit (optionally), switch, commit and push the NixOS configuration."""
    try:
        editor = split_command(editor_name) if open_editor else None
        plan = build_plan(device, update=update, editor=editor, message=message)

        if dry_run:
            _print_plan(plan, flake)
            return

        for argv in plan:
            run_command(argv[0], argv[1:], cwd=flake)
    except ScriptError as exc:
        fatal(str(exc))

    info(f"Switched {device} and pushed {flake}")


def build_plan(
    device: str,
    *,
    update: bool = False,
    editor: Optional[List[str]] = None,
    message: str = DEFAULT_COMMIT_MESSAGE,
) -> List[List[str]]:
    """Return the ordered argv lists of a rebuild run."""
    plan: List[List[str]] = []
    if editor:
        plan.append(list(editor))

    plan.append(["git", "add", "."])

    switch = ["nh", "os", "switch", "-H", device, "."]
    if update:
        switch.append("--update")
    plan.append(switch)

    plan.append(["git", "commit", "-am", message])
    plan.append(["git", "push"])
    return plan


def _print_plan(plan: List[List[str]], flake: Path) -> None:
    table = Table(title=f"Plan in {flake}", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Command")
    for idx, argv in enumerate(plan, start=1):
        table.add_row(str(idx), escape(shlex.join(argv)))
    print(table)


# Entry point for running the script directly
if __name__ == "__main__":
    app()
