"""Temperature from a thermal sensor file."""

from __future__ import annotations

from typing import Optional

from .util import read_uint


def temp(file: str) -> Optional[str]:
    """Return whole degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    if value is None:
        return None
    return str(value // 1000)