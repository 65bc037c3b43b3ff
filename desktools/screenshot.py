"""CLI: take a screenshot with grim, copy it to the clipboard and notify.

Subcommands:
    fullscreen   every output
    window       the focused sway window
    region       an area selected with slurp

Files land in ``<pictures>/screenshots`` as
``screenshot-YYYY-mm-dd-HH:MM:SS.png`` unless ``--dir``/``SCREENSHOT_DIR``
says otherwise.
"""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import typer
from rich import print
from rich.markup import escape

from ._cli_common import new_typer_app
from ._cli_output import fatal
from ._process import ScriptError, run_command
from .sway import focused_window_geometry


app = new_typer_app()

FILE_NAME_FORMAT = "screenshot-%Y-%m-%d-%H:%M:%S.png"
NOTIFICATION_SUMMARY = "Screenshot"

_USER_DIRS_LINE = re.compile(r'^\s*XDG_PICTURES_DIR\s*=\s*"?([^"\n]*)"?\s*$', re.MULTILINE)


@app.callback()
def screenshot(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        envvar="SCREENSHOT_DIR",
        file_okay=False,
        help="Directory for screenshots (default: <pictures>/screenshots)",
    ),
):
    """Capture the screen, a window or a region into a PNG file."""
    ctx.obj = directory


@app.command("fullscreen")
def fullscreen(ctx: typer.Context):
    """Capture every output."""
    _capture(ctx.obj, lambda path: run_command("grim", [str(path)]))


@app.command("window")
def window(ctx: typer.Context):
    """Capture the focused sway window."""

    def grab(path: Path) -> None:
        geometry = focused_window_geometry()
        run_command("grim", ["-g", geometry, str(path)])

    _capture(ctx.obj, grab)


@app.command("region")
def region(
    ctx: typer.Context,
    slurp_fg: str = typer.Option(..., "--slurp-fg", envvar="SLURP_FG", help="slurp selection color (-c)"),
    slurp_bg: str = typer.Option(..., "--slurp-bg", envvar="SLURP_BG", help="slurp background color (-b)"),
):
    """Capture a region selected interactively with slurp."""

    def grab(path: Path) -> None:
        output = run_command("slurp", ["-c", slurp_fg, "-b", slurp_bg], capture=True)
        try:
            geometry = output.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise ScriptError(f"slurp printed invalid UTF-8: {exc}") from exc
        run_command("grim", ["-g", geometry, str(path)])

    _capture(ctx.obj, grab)


def _capture(directory: Optional[Path], grab: Callable[[Path], object]) -> None:
    """Run ``grab`` into a fresh screenshot path, then copy and announce the file."""
    try:
        path = screenshot_path(directory)
        grab(path)
        copy_to_clipboard(path)
        notify(path)
    except (ScriptError, OSError) as exc:
        fatal(str(exc))

    print(f"[green]Saved[/green] {escape(str(path))}")


def screenshot_path(directory: Optional[Path] = None, now: Optional[datetime] = None) -> Path:
    """Create the screenshot directory and return the path for a new file."""
    folder = Path(directory).expanduser() if directory else pictures_dir() / "screenshots"
    folder.mkdir(parents=True, exist_ok=True)
    return folder / (now or datetime.now()).strftime(FILE_NAME_FORMAT)


def pictures_dir() -> Path:
    """Resolve the XDG pictures directory.

    Order: ``$XDG_PICTURES_DIR``, the entry in ``$XDG_CONFIG_HOME/user-dirs.dirs``,
    then ``~/Pictures``.
    """
    env_dir = os.environ.get("XDG_PICTURES_DIR")
    if env_dir:
        return Path(env_dir).expanduser()

    config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    user_dirs = config_home / "user-dirs.dirs"
    if user_dirs.is_file():
        match = _USER_DIRS_LINE.search(user_dirs.read_text(encoding="utf-8", errors="replace"))
        if match and match.group(1):
            value = match.group(1).replace("$HOME", str(Path.home()))
            return Path(value).expanduser()

    return Path.home() / "Pictures"


def copy_to_clipboard(path: Path) -> None:
    run_command("wl-copy", input=path.read_bytes())


def notify(path: Path) -> None:
    run_command(
        "notify-send",
        ["--icon", str(path), NOTIFICATION_SUMMARY, f"File saved as {path}, and copied to clipboard"],
    )


# Entry point for running the script directly
if __name__ == "__main__":
    app()
