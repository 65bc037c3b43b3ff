"""Strip ANSI/VT control sequences from captured terminal text."""

from __future__ import annotations

import re

# ESC [ parameter bytes, intermediate bytes, final byte (colors, cursor moves, ...)
CONTROL_SEQUENCES = r"\x1b\[[\x30-\x3F]*[\x20-\x2F]*[\x40-\x7E]"
# ESC followed by a single byte in 0x60-0x7E (e.g. ESC c, full reset)
INDEPENDENT_CONTROL_FUNCTIONS = r"\x1b[\x60-\x7E]"
# APC / DCS / OSC / PM strings, terminated by ST (ESC \) or BEL
COMMAND_STRINGS = r"\x1b[\x5F\x50\x5D\x5E][\x08-\x0D\x20-\x7E]*(?:\x1b\\|\x07)"
CARRIAGE_RETURN = r"\r"

# Unicode White_Space property, the set trimmed from both ends of scrollback
WHITESPACE = (
    "\t\n\x0b\x0c\r\x20\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

ANSI_PATTERN = re.compile(
    "|".join(
        (
            CONTROL_SEQUENCES,
            INDEPENDENT_CONTROL_FUNCTIONS,
            COMMAND_STRINGS,
            CARRIAGE_RETURN,
        )
    )
)


def strip_ansi(text: str) -> str:
    """Remove every control sequence and carriage return from ``text``."""
    return ANSI_PATTERN.sub("", text)


def clean_scrollback(text: str) -> str:
    """Trim surrounding Unicode White_Space, then strip control sequences.

    The information separators 0x1C-0x1F count as whitespace for ``str.strip()``
    but are not White_Space, so they are kept.

    Example:
        >>> clean_scrollback("\\n\\x1b[1;32mok\\x1b[0m\\r\\n")
        'ok'
    """
    return strip_ansi(text.strip(WHITESPACE))
