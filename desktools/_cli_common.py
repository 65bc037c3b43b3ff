"""Shared Typer helpers for desktools subcommands."""

from __future__ import annotations

from typing import Any

import typer

HELP_OPTION_NAMES = ("-h", "--help")


def new_typer_app(**kwargs: Any) -> typer.Typer:
    """Create a Typer app with the -h/--help shortcut and no shell completion flags."""
    context_settings = dict(kwargs.pop("context_settings", {}) or {})
    context_settings.setdefault("help_option_names", list(HELP_OPTION_NAMES))
    kwargs.setdefault("add_completion", False)
    return typer.Typer(context_settings=context_settings, **kwargs)
