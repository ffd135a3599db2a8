"""Keyboard layout names and lock-key indicator formatting."""

from __future__ import annotations

import re
from typing import Optional

# symbols from the xkb rules configuration that are not layouts
_INVALID = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether an xkb symbols token names a layout or variant."""
    return not sym.startswith(_INVALID)


def get_layout(syms: str, group: int) -> Optional[str]:
    """Return the layout of xkb group ``group`` from a symbols string.

    ``syms`` looks like ``pc+us+de:2+inet(evdev)``. If there are fewer
    groups than asked for, the last layout found is returned.
    """
    layout = None
    found = 0
    for token in filter(None, _SEPARATORS.split(syms)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        # ":2", ":3", ... mark additional layout groups
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    return layout


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps and num lock state according to ``fmt``.

    ``fmt`` holds 'c' (caps lock) and/or 'n' (num lock) in either case,
    each optionally followed by '?'. With '?', the letter appears as
    written only when its indicator is on; without, it always appears,
    lower case when off and upper case when on. Only the first four
    characters of ``fmt`` are used.
    """
    fmt = fmt[:4]
    out = []
    for position, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        toggle_case = position + 1 >= len(fmt) or fmt[position + 1] != "?"
        is_set = bool(led_mask & (1 << (key == "n")))
        if toggle_case:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)