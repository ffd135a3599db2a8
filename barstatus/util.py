"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys
from os import PathLike
from typing import Optional, Union

PathType = Union[str, "PathLike[str]"]

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: float, base: int) -> Optional[str]:
    """Scale ``num`` by ``base`` and add the matching unit prefix.

    Returns None (after a warning) when ``base`` is neither 1000 nor 1024.
    """
    prefixes = _PREFIXES.get(base)
    if prefixes is None:
        warn("fmt_human: Invalid base")
        return None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def cformat(fmt: str, value: str) -> str:
    """Substitute ``value`` into a printf-style format with one ``%s``.

    Raises ValueError when the format does not take exactly one value.
    """
    try:
        return fmt % (value,)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"bad format {fmt!r}: {exc}") from exc


def read_first_line(path: PathType) -> Optional[str]:
    """Return the first line of a file without its newline, or None.

    None is returned when the file cannot be read or the line is empty.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None

    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def read_uint(path: PathType) -> Optional[int]:
    """Read a leading unsigned integer from a file, or None on failure."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None

    match = _UINT.match(text)
    return int(match.group(1)) if match else None