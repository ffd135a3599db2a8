"""Battery readings from the power-supply class in sysfs."""

from __future__ import annotations

import os
import re
from typing import Optional

from .util import read_uint

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE = re.compile(r"[a-zA-Z ]{1,12}")
_INT = re.compile(r"\s*([+-]?\d+)")


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _pick(bat: str, first: str, second: str) -> Optional[str]:
    for name in (first, second):
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(bat: str) -> Optional[str]:
    try:
        with open(_path(bat, "status"), encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def battery_perc(bat: str) -> Optional[str]:
    """Return the battery capacity in percent."""
    try:
        with open(_path(bat, "capacity"), encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return None
    match = _INT.match(text)
    return str(int(match.group(1))) if match else None


def battery_state(bat: str) -> Optional[str]:
    """Return '+' charging, '-' discharging, 'o' full, '?' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> Optional[str]:
    """Return the time left on battery as 'Hh Mm', or '' when not discharging."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"