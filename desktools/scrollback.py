"""CLI: open terminal scrollback, piped on stdin, in an editor without escape codes.

Typical use from a terminal's "pipe scrollback" binding:

    desktools scrollback --editor-name "nvim -"
"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from ._cli_common import new_typer_app
from ._cli_output import fatal
from ._process import ScriptError, run_command, split_command
from .ansi import clean_scrollback


app = new_typer_app()


@app.callback(invoke_without_command=True)
def scrollback(
    editor_name: Optional[str] = typer.Option(
        None, "--editor-name", envvar="EDITOR", help="Editor command that reads the text from stdin"
    ),
):
    """Read scrollback from stdin, strip ANSI control sequences, and hand it to the editor."""
    try:
        editor = split_command(editor_name)
        raw = sys.stdin.buffer.read()
        text = clean_scrollback(raw.decode("utf-8", errors="replace"))
        run_command(editor[0], editor[1:], input=text.encode("utf-8"))
    except ScriptError as exc:
        fatal(str(exc))


# Entry point for running the script directly
if __name__ == "__main__":
    app()
