"""Simple status components: files, time, disk, host and user information."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time
from typing import Optional

from .util import fmt_human, read_first_line, read_uint, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
_BUFSIZE = 1024


def cat(path: str) -> Optional[str]:
    """Return the first line of a file, or None if it is empty or unreadable."""
    return read_first_line(path)


def datetime(fmt: str) -> Optional[str]:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str) -> Optional[os.statvfs_result]:
    try:
        return os.statvfs(path)
    except OSError as exc:
        warn(f"statvfs '{path}': {exc.strerror}")
        return None


def disk_free(path: str) -> Optional[str]:
    """Return the space available to unprivileged users."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> Optional[str]:
    """Return the used share of the file system in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> Optional[str]:
    """Return the total size of the file system."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> Optional[str]:
    """Return the used space of the file system."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(unused: Optional[str] = None) -> Optional[str]:
    """Return the kernel's available entropy (infinity on BSD systems)."""
    if not sys.platform.startswith("linux"):
        return "\u221e"
    num = read_uint(ENTROPY_AVAIL)
    return None if num is None else str(num)


def hostname(unused: Optional[str] = None) -> Optional[str]:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror}")
        return None


def kernel_release(unused: Optional[str] = None) -> Optional[str]:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror}")
        return None


def load_avg(unused: Optional[str] = None) -> Optional[str]:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str) -> Optional[str]:
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror}")
        return None
    return str(len(entries))


def run_command(cmd: str) -> Optional[str]:
    """Run a shell command and return the first line of its output."""
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror}")
        return None

    output = completed.stdout.decode("utf-8", errors="replace")
    line = output.splitlines(keepends=True)[0] if output else ""
    line = line[: _BUFSIZE - 2]
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise OSError("no suitable clock")


def uptime(unused: Optional[str] = None) -> Optional[str]:
    """Return the system uptime as 'Hh Mm'."""
    try:
        seconds = int(time.clock_gettime(_uptime_clock()))
    except OSError as exc:
        warn(f"clock_gettime: {exc}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: Optional[str] = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused: Optional[str] = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused: Optional[str] = None) -> Optional[str]:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None