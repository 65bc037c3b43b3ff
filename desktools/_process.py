"""Run external programs, failing loudly on non-zero exits.

Every desktools command is a straight line of child processes. A child
either exits 0 or the whole command stops with a ``CommandError``.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Iterable, Optional

from ._cli_output import step


class ScriptError(Exception):
    """A failure that aborts the running desktools command."""


class CommandError(ScriptError):
    """An external program could not be started or exited unsuccessfully."""


def run_command(
    command: str,
    args: Iterable[str] = (),
    *,
    cwd: Optional[os.PathLike | str] = None,
    capture: bool = False,
    input: Optional[bytes] = None,
) -> bytes:
    """Run ``command`` with ``args`` and wait for it.

    stdin is inherited unless ``input`` is given, in which case those bytes
    are written to the child and its stdin is closed. stdout is inherited
    unless ``capture`` is set; the captured bytes are returned (``b""``
    otherwise). stderr always goes to the terminal.
    """
    argv = [command, *args]
    step(argv)

    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            input=input,
            stdout=subprocess.PIPE if capture else None,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"Command {command} could not be started: {exc.strerror or exc}") from exc

    if proc.returncode < 0:
        raise CommandError(f"Command {command} was terminated by signal {-proc.returncode}")
    if proc.returncode != 0:
        raise CommandError(f"Command {command} exited with exit status {proc.returncode}")

    return proc.stdout or b""


def split_command(value: Optional[str]) -> list[str]:
    """Split an editor-style command string such as ``"code -w"`` into argv."""
    try:
        argv = shlex.split(value or "")
    except ValueError as exc:
        raise ScriptError(f"Cannot parse command {value!r}: {exc}") from exc
    if not argv:
        raise ScriptError("No editor configured; pass --editor-name or set EDITOR")
    return argv
