"""Checks of the command line and lookup of the programs it names."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from pipex.errors import ExitCode, PipexError
from pipex.libft.strings import strjoin

OPERAND_COUNT = 4


def check_arguments(argv: Sequence[str]) -> tuple[str, ...]:
    """Validate ``infile cmd1 cmd2 outfile`` and return them as a tuple.

    Raises PipexError for a wrong count or empty command, and when the
    input file cannot be read.
    """
    if len(argv) != OPERAND_COUNT:
        raise PipexError(ExitCode.INVALID_INPUT)
    infile, first, second, _ = argv
    if not os.access(infile, os.R_OK):
        raise PipexError(ExitCode.INFILE)
    if not first or not second:
        raise PipexError(ExitCode.INVALID_INPUT)
    return tuple(argv)


def program_name(command: str) -> str:
    """The part of ``command`` before its first space."""
    return command.partition(" ")[0]


def resolve_program(command: str, path_dirs: Iterable[str]) -> str | None:
    """The first executable ``dir/program`` found for ``command``, or None."""
    for directory in path_dirs:
        candidate = strjoin(strjoin(directory, "/"), command)
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_programs(commands: Iterable[str], path_dirs: Iterable[str]) -> list[str]:
    """Resolve every command; raise PipexError if any cannot be found."""
    dirs = list(path_dirs)
    found = [resolve_program(command, dirs) for command in commands]
    if any(path is None for path in found):
        raise PipexError(ExitCode.PROGRAM_NOT_FOUND)
    return found