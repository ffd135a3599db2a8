"""Default configuration: update interval, placeholder text and components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .basic import datetime

# interval between updates, in milliseconds
INTERVAL = 1000

# text shown when a component cannot produce a value
UNKNOWN_STR = "n/a"

# maximum length of the status line, in bytes, including the terminator
MAXLEN = 2048

Component = Callable[[Optional[str]], Optional[str]]


@dataclass(frozen=True)
class Entry:
    """One piece of the status line.

    ``func`` is called with ``argument`` and its result is put into the
    printf-style ``fmt``, which takes exactly one ``%s``.
    """

    func: Component
    fmt: str
    argument: Optional[str] = None


def default_entries(interval: int = INTERVAL) -> List[Entry]:
    """Return the default list of status entries.

    ``interval`` is the update interval in milliseconds that rate-based
    components are measured against; it must be positive.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    return [Entry(datetime, "%s", "%F %T")]