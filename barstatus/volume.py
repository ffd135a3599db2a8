"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct
from typing import Optional

from .util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

# _IOR('M', nr, int)
_MIXER_READ_BASE = 0x80044D00
SOUND_MIXER_READ_DEVMASK = _MIXER_READ_BASE | 0xFE


def _mixer_read(index: int) -> int:
    return _MIXER_READ_BASE | index


def _ioctl_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> Optional[str]:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror}")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror}")
            return None

        level = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _ioctl_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror}")
                    return None
    finally:
        os.close(fd)

    if level is None:
        warn("vol_perc: no volume control on mixer")
        return None
    return str(level & 0xFF)