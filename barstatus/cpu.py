"""Processor frequency and utilisation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .util import fmt_human, read_uint, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused: Optional[str] = None) -> Optional[str]:
    """Return the current frequency of the first processor."""
    freq = read_uint(CPU_FREQ)
    if freq is None:
        return None
    # the kernel reports kHz
    return fmt_human(freq * 1000, 1000)


def _read_sample(path: str) -> Optional[Tuple[float, ...]]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None

    tokens = text.split(None, _FIELDS + 1)[1 : _FIELDS + 1]
    if len(tokens) != _FIELDS:
        return None
    try:
        return tuple(float(token) for token in tokens)
    except ValueError:
        return None


@dataclass
class CpuPercent:
    """Processor utilisation in percent since the previous call.

    The first call only records a sample and returns None.
    """

    stat_path: str = PROC_STAT
    _previous: Optional[Tuple[float, ...]] = field(
        default=None, init=False, repr=False
    )

    def __call__(self, unused: Optional[str] = None) -> Optional[str]:
        previous = self._previous
        current = _read_sample(self.stat_path)
        if current is None:
            return None
        self._previous = current

        if previous is None or previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None

        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))