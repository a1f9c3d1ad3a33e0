"""Command line: ``pipex infile cmd1 cmd2 outfile``."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from pipex.environment import search_path
from pipex.errors import ExitCode, PipexError
from pipex.pipeline import Pipeline
from pipex.validation import check_arguments, resolve_programs


def run(argv: Sequence[str], environ: Mapping[str, str] | None = None) -> int:
    """Validate the operands, find both programs and run the pipeline.

    Returns 0 once both programs have finished; raises PipexError when the
    arguments, the search path or the programs are not usable.
    """
    if environ is None:
        environ = os.environ
    infile, first, second, outfile = check_arguments(argv)
    if outfile == "":
        raise PipexError(ExitCode.INVALID_INPUT)
    path_dirs = search_path(environ)
    if path_dirs is None:
        raise PipexError(ExitCode.INVALID_PATH)
    first_path, second_path = resolve_programs([first, second], path_dirs)
    Pipeline(infile, outfile, (first_path, first), (second_path, second), environ).run()
    return ExitCode.SUCCESS.value


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        return run(list(argv), os.environ)
    except PipexError as error:
        error.report()
        return error.exit_status


if __name__ == "__main__":
    sys.exit(main())