"""Memory and swap usage from /proc/meminfo."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Tuple

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")
_LONG = re.compile(r"\s*([+-]?\d+)")
_GIB_IN_KIB = 1024 * 1024


def _read_text() -> Optional[str]:
    try:
        with open(MEMINFO, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{MEMINFO}': {exc.strerror}")
        return None


def _leading_fields(count: int) -> Optional[Tuple[int, ...]]:
    """Read the first ``count`` RAM fields, which must appear in order."""
    text = _read_text()
    if text is None:
        return None
    pattern = "".join(
        rf"\s*{name}:\s*(\d+)\s*kB" for name in _RAM_FIELDS[:count]
    )
    match = re.match(pattern, text)
    if match is None:
        return None
    return tuple(int(value) for value in match.groups())


def ram_free(unused: Optional[str] = None) -> Optional[str]:
    """Return the memory available for new allocations."""
    fields = _leading_fields(3)
    if fields is None:
        return None
    return fmt_human(fields[2] * 1024, 1024)


def ram_perc(unused: Optional[str] = None) -> Optional[str]:
    """Return the used memory, without buffers and cache, in percent."""
    fields = _leading_fields(5)
    if fields is None:
        return None
    total, free, _, buffers, cached = fields
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused: Optional[str] = None) -> Optional[str]:
    """Return the total memory in whole GiB."""
    fields = _leading_fields(1)
    if fields is None:
        return None
    return f"{fields[0] // _GIB_IN_KIB}G"


def ram_used(unused: Optional[str] = None) -> Optional[str]:
    """Return the used memory, without buffers and cache, in whole GiB."""
    fields = _leading_fields(5)
    if fields is None:
        return None
    total, free, _, buffers, cached = fields
    return f"{(total - free - buffers - cached) // _GIB_IN_KIB}G"


def _swap_info(wanted: Iterable[str]) -> Optional[Dict[str, int]]:
    text = _read_text()
    if text is None:
        return None

    missing = set(wanted)
    found: Dict[str, int] = {}
    for line in text.splitlines():
        if not missing:
            break
        for name in _SWAP_FIELDS:
            if name in missing and line.startswith(name):
                match = _LONG.match(line[len(name) + 1 :])
                if match is None:
                    return None
                found[name] = int(match.group(1))
                missing.discard(name)
                break

    return None if missing else found


def swap_free(unused: Optional[str] = None) -> Optional[str]:
    """Return the free swap space."""
    info = _swap_info(("SwapFree",))
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(unused: Optional[str] = None) -> Optional[str]:
    """Return the used swap space in percent."""
    info = _swap_info(_SWAP_FIELDS)
    if info is None or info["SwapTotal"] == 0:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return str(int(100 * used / info["SwapTotal"]))


def swap_total(unused: Optional[str] = None) -> Optional[str]:
    """Return the total swap space."""
    info = _swap_info(("SwapTotal",))
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused: Optional[str] = None) -> Optional[str]:
    """Return the used swap space."""
    info = _swap_info(_SWAP_FIELDS)
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)