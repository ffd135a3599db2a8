"""Network throughput from interface byte counters."""

from __future__ import annotations

import os
from typing import Optional

from .util import fmt_human, read_uint

_DIRECTIONS = {"rx": "rx_bytes", "tx": "tx_bytes"}
_UINTMAX = (1 << 64) - 1


class NetSpeed:
    """Bytes per second received ("rx") or sent ("tx") since the last call.

    ``interval`` is the update interval in milliseconds. The first call
    only records the counter and returns None.
    """

    sysfs_root = "/sys/class/net"

    def __init__(self, direction: str, interval: int) -> None:
        if direction not in _DIRECTIONS:
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self._bytes = 0

    def __call__(self, interface: str) -> Optional[str]:
        previous = self._bytes
        path = os.path.join(
            self.sysfs_root, interface, "statistics", _DIRECTIONS[self.direction]
        )
        current = read_uint(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None

        # counters are unsigned; a reset wraps around like the kernel's
        delta = (current - previous) & _UINTMAX
        rate = ((delta * 1000) & _UINTMAX) // self.interval
        return fmt_human(rate, 1024)