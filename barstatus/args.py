"""Command-line flag parsing for the status monitor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class UsageError(Exception):
    """The command line is not valid."""


class VersionRequested(Exception):
    """The version flag was given."""


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""

    to_stdout: bool = False
    once: bool = False


def parse_args(argv: Iterable[str]) -> Options:
    """Parse flags from the arguments that follow the program name.

    ``-s`` writes to standard output, ``-1`` writes once to standard output
    and ``-v`` requests the version. Flags may be combined (``-s1``) and
    ``--`` ends the options. Any other flag or any positional argument
    raises UsageError.
    """
    args = list(argv)
    to_stdout = False
    once = False

    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise VersionRequested()
            if flag == "1":
                once = True
                to_stdout = True
            elif flag == "s":
                to_stdout = True
            else:
                raise UsageError(f"unknown option -{flag}")

    if args:
        raise UsageError(f"unexpected argument {args[0]!r}")
    return Options(to_stdout=to_stdout, once=once)