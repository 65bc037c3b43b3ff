"""Console output helpers shared by the desktools commands."""

from __future__ import annotations

import shlex
from typing import NoReturn, Sequence

import typer


def info(message: str) -> None:
    """Print a neutral informational message."""
    typer.echo(f"[info] {message}")


def error(message: str, *, err: bool = True) -> None:
    """Print an error message in red, on stderr by default."""
    typer.secho(f"[error] {message}", fg=typer.colors.RED, err=err)


def step(argv: Sequence[str]) -> None:
    """Echo an external command to stderr right before it runs."""
    typer.secho(f"$ {shlex.join(argv)}", fg=typer.colors.BRIGHT_BLACK, err=True)


def fatal(message: str, *, code: int = 1, err: bool = True) -> NoReturn:
    """Print an error message and terminate the command."""
    error(message, err=err)
    raise typer.Exit(code=code)
