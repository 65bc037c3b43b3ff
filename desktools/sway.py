"""Look up the focused window through the sway IPC socket."""

from __future__ import annotations

from typing import Any

from i3ipc import Connection

from ._process import ScriptError

# Node types sway uses for tiled and floating windows
WINDOW_NODE_TYPES = ("con", "floating_con")


def format_geometry(rect: Any) -> str:
    """Format a rectangle as a grim/slurp geometry string, e.g. ``"10,20 640x480"``."""
    return f"{rect.x},{rect.y} {rect.width}x{rect.height}"


def focused_window_geometry(connection: Any = None) -> str:
    """Return the geometry of the focused window.

    Raises ScriptError when sway is unreachable or nothing window-like has focus
    (for example an empty workspace).
    """
    if connection is None:
        try:
            connection = Connection()
        except Exception as exc:
            # i3ipc raises a bare Exception when no IPC socket can be found
            raise ScriptError(f"Cannot connect to sway: {exc}") from exc

    try:
        tree = connection.get_tree()
    except OSError as exc:
        raise ScriptError(f"Cannot query the sway tree: {exc}") from exc

    focused = tree.find_focused()
    if focused is None or focused.type not in WINDOW_NODE_TYPES:
        raise ScriptError("Cannot get focused window")

    return format_geometry(focused.rect)
