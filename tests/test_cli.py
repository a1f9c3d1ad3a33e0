import sys

import pytest

from pipex.cli import main, run
from pipex.errors import ExitCode, PipexError

FILTER = """#!{python}
import sys
data = sys.stdin.read()
mode = sys.argv[1]
sys.stdout.write(data.upper() if mode == "upper" else data[::-1])
"""


@pytest.fixture
def bindir(tmp_path):
    directory = tmp_path / "bin"
    directory.mkdir()
    tool = directory / "filter"
    tool.write_text(FILTER.format(python=sys.executable))
    tool.chmod(0o755)
    return str(directory)


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\n")
    return str(path)


def test_wrong_count(infile):
    with pytest.raises(PipexError) as info:
        run([infile, "filter upper"], {"PATH": "/bin"})
    assert info.value.code is ExitCode.INVALID_INPUT


def test_empty_outfile(infile, bindir):
    with pytest.raises(PipexError) as info:
        run([infile, "filter upper", "filter upper", ""], {"PATH": bindir})
    assert info.value.code is ExitCode.INVALID_INPUT


def test_missing_path(infile, tmp_path):
    with pytest.raises(PipexError) as info:
        run([infile, "a", "b", str(tmp_path / "out")], {"HOME": "/home/user"})
    assert info.value.code is ExitCode.INVALID_PATH


def test_program_not_found(infile, bindir, tmp_path):
    with pytest.raises(PipexError) as info:
        run([infile, "filter upper", "absent", str(tmp_path / "out")], {"PATH": bindir})
    assert info.value.code is ExitCode.PROGRAM_NOT_FOUND


def test_full_run(infile, bindir, tmp_path):
    outfile = tmp_path / "out.txt"
    status = run([infile, "filter upper", "filter reverse", str(outfile)], {"PATH": bindir})
    assert status == ExitCode.SUCCESS
    assert outfile.read_text() == "hello\n".upper()[::-1]


def test_main_reports_and_returns_status(capsys):
    status = main(["only-one"])
    assert status == PipexError(ExitCode.INVALID_INPUT).exit_status
    assert capsys.readouterr().out == "Your input is invalid.\n"


def test_main_missing_infile(tmp_path, capsys):
    status = main([str(tmp_path / "absent"), "cat", "wc", str(tmp_path / "out")])
    assert status == PipexError(ExitCode.INFILE).exit_status
    assert capsys.readouterr().out == "Infile permission denied or not found\n"