"""Running two programs joined by a pipe, between an input and an output file."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping

from pipex.errors import ExitCode, PipexError
from pipex.libft.strings import split

Program = tuple[str, str]


def _open_or_none(path: str, flags: int, mode: int = 0o644) -> int | None:
    try:
        return os.open(path, flags, mode)
    except OSError:
        return None


class Pipeline:
    """``infile | first | second > outfile``.

    ``first`` and ``second`` are each a pair of the resolved executable and
    the command line whose words become the program's arguments.
    """

    def __init__(
        self,
        infile: str,
        outfile: str,
        first: Program,
        second: Program,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.infile = infile
        self.outfile = outfile
        self.first = first
        self.second = second
        self.env = None if env is None else dict(env)

    def _start(
        self, program: Program, stdin: int | None, stdout: int | None, failure: ExitCode
    ) -> subprocess.Popen | int:
        executable, command = program
        args = split(command, " ")
        if not args:
            error = PipexError(ExitCode.INFILE)
            error.report()
            return error.exit_status
        try:
            return subprocess.Popen(
                args, executable=executable, stdin=stdin, stdout=stdout, env=self.env
            )
        except OSError:
            error = PipexError(failure)
            error.report()
            return error.exit_status

    def run(self) -> tuple[int, int]:
        """Run both programs and return their exit statuses.

        A program that cannot be started is reported and given the status of
        its error code; the other one still runs. Raises PipexError when the
        pipe itself cannot be made.
        """
        out_fd = _open_or_none(self.outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
        in_fd = _open_or_none(self.infile, os.O_RDONLY)
        try:
            try:
                read_end, write_end = os.pipe()
            except OSError as exc:
                raise PipexError(ExitCode.FAILURE) from exc
            try:
                started = (
                    self._start(self.first, in_fd, write_end, ExitCode.FIRST_COMMAND),
                    self._start(self.second, read_end, out_fd, ExitCode.SECOND_COMMAND),
                )
            finally:
                os.close(read_end)
                os.close(write_end)
        finally:
            for fd in (in_fd, out_fd):
                if fd is not None:
                    os.close(fd)
        first, second = (
            item.wait() if isinstance(item, subprocess.Popen) else item
            for item in started
        )
        return first, second