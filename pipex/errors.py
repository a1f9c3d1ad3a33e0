"""Exit codes of the program and the error that carries them."""

from __future__ import annotations

import enum
import sys

from pipex.printf import printf


class ExitCode(enum.IntEnum):
    """Every status the program ends with."""

    SUCCESS = 0
    FAILURE = -1
    INVALID_PATH = -2
    INVALID_INPUT = -3
    INFILE = -4
    OUTFILE = -5
    PROGRAM_NOT_FOUND = -6
    FIRST_COMMAND = -7
    SECOND_COMMAND = -8


_STDOUT_MESSAGES = {
    ExitCode.INVALID_PATH: "Your envpath is invalid.\n",
    ExitCode.INVALID_INPUT: "Your input is invalid.\n",
    ExitCode.INFILE: "Infile permission denied or not found\n",
    ExitCode.OUTFILE: "Outfile permission denied or not found\n",
    ExitCode.PROGRAM_NOT_FOUND: "Program not found\n",
}

_STDERR_MESSAGES = {
    ExitCode.FIRST_COMMAND: "Error executing first command\n",
    ExitCode.SECOND_COMMAND: "Error executing second command\n",
}


class PipexError(Exception):
    """An error that ends the program with one of the ``ExitCode`` values."""

    def __init__(self, code: ExitCode | int) -> None:
        self.code = ExitCode(code)
        self.message = _STDOUT_MESSAGES.get(self.code) or _STDERR_MESSAGES.get(
            self.code, ""
        )
        super().__init__(self.message.strip() or self.code.name)

    @property
    def exit_status(self) -> int:
        """The process exit status the code maps to."""
        return self.code.value % 256

    def report(self) -> None:
        """Write the code's message to the stream it belongs on."""
        if self.code in _STDOUT_MESSAGES:
            printf("%s", self.message)
        elif self.code in _STDERR_MESSAGES:
            sys.stderr.write(self.message)
            sys.stderr.flush()