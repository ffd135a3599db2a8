"""Status line assembly, the update loop and the command entry point."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from typing import Callable, Iterable, List, Optional, Sequence

from .args import UsageError, VersionRequested, parse_args
from .config import INTERVAL, MAXLEN, UNKNOWN_STR, Entry, default_entries
from .util import cformat, warn

VERSION = "1.0"
PROGRAM = "barstatus"


class _Fatal(Exception):
    """An error that ends the program with status 1."""


def render_status(entries: Iterable[Entry], unknown: str, maxlen: int) -> str:
    """Join the formatted results of all entries into one status line.

    A component returning None is shown as ``unknown``. Assembly stops at
    the first piece that has a bad format or would not fit into ``maxlen``
    bytes (one of which is kept for the terminator).
    """
    pieces: List[str] = []
    length = 0
    for entry in entries:
        result = entry.func(entry.argument)
        if result is None:
            result = unknown
        try:
            piece = cformat(entry.fmt, result)
        except ValueError:
            warn("vsnprintf:")
            break
        size = len(piece.encode("utf-8"))
        if size >= maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        pieces.append(piece)
        length += size
    return "".join(pieces)


class _LoopState:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.wake = threading.Event()

    def handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self.wake.set()


def run(
    entries: Sequence[Entry],
    interval: int,
    once: bool,
    output: Callable[[str], None],
) -> None:
    """Render the status line and pass it to ``output`` every ``interval`` ms.

    With ``once`` the line is produced a single time. SIGINT and SIGTERM end
    the loop after the current update; SIGUSR1 forces an immediate update.
    """
    state = _LoopState(once)
    installed = {}
    if threading.current_thread() is threading.main_thread():
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            installed[signo] = signal.signal(signo, state.handle)

    try:
        while True:
            start = time.monotonic()
            output(render_status(entries, UNKNOWN_STR, MAXLEN))
            if not state.done:
                remaining = interval / 1000 - (time.monotonic() - start)
                if remaining >= 0:
                    state.wake.wait(remaining)
                state.wake.clear()
            if state.done:
                break
    finally:
        for signo, previous in installed.items():
            signal.signal(signo, previous)


def _print_line(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError as exc:
        raise _Fatal(f"puts: {exc.strerror}") from exc


def _set_root_name(status: str) -> None:
    completed = subprocess.run(
        ["xsetroot", "-name", status],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    if completed.returncode != 0:
        raise _Fatal("XStoreName: Failed to set root window name")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the status monitor; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except VersionRequested:
        warn(f"{PROGRAM}-{VERSION}")
        return 1
    except UsageError:
        warn(f"usage: {PROGRAM} [-v] [-s] [-1]")
        return 1

    if options.to_stdout:
        output = _print_line
    else:
        if not os.environ.get("DISPLAY") or shutil.which("xsetroot") is None:
            warn("XOpenDisplay: Failed to open display")
            return 1
        output = _set_root_name

    try:
        run(default_entries(INTERVAL), INTERVAL, options.once, output)
        if not options.to_stdout:
            _set_root_name("")
    except _Fatal as exc:
        warn(str(exc))
        return 1
    return 0