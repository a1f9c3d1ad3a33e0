# pipex

`pipex` runs two programs connected by a pipe. The first program reads from an
input file, and its output goes to the second program. Whatever the second
program writes ends up in an output file. This is what the shell does for

    < infile cmd1 | cmd2 > outfile

## Usage

    pipex infile "cmd1 args" "cmd2 args" outfile

For example:

    pipex input.txt "grep error" "wc -l" count.txt

Each command is split on spaces into a program name and its arguments. Quoting
is not interpreted. The program name is looked up in the directories of the
first environment entry whose name starts with `PATH`. The first executable
match wins. The output file is created with mode `0644` if it does not exist,
and it is truncated if it does. If the output file cannot be opened, the second
program writes to standard output instead.

Once both programs have finished, `pipex` exits with status 0. The exit
statuses of the two programs are not passed on.

## Errors

`pipex` prints a message and stops with a non-zero exit status in these cases:

- the number of arguments is not exactly four, a command is empty, or the
  output file name is empty: `Your input is invalid.`
- the input file cannot be read: `Infile permission denied or not found`
- there is no `PATH` in the environment: `Your envpath is invalid.`
- a program cannot be found on `PATH`: `Program not found`

These messages go to standard output. If a program was found but cannot be
started, `Error executing first command` or `Error executing second command`
is written to standard error. The other program still runs in that case.

## Using it from Python

The command-line entry point is `pipex.cli.main(argv=None)`. It returns the
exit status. `pipex.cli.run(argv, environ)` takes the four operands and an
environment mapping, and raises `pipex.errors.PipexError` on failure.

The pieces that `run` is built from can also be used on their own:

- `pipex.environment.search_path(envp)` returns the `PATH` directories from a
  mapping or from `NAME=value` strings. It returns `None` if there is no
  `PATH`.
- `pipex.validation.check_arguments(argv)` checks the four operands.
- `pipex.validation.resolve_program(command, path_dirs)` finds the executable
  for one command. `resolve_programs(commands, path_dirs)` finds all of them.
- `pipex.pipeline.Pipeline(infile, outfile, first, second, env)` runs the two
  processes. `first` and `second` are each a pair of an executable path and a
  command line. `Pipeline.run()` returns the two exit statuses.

`PipexError` carries an `ExitCode` as `code`. `exit_status` gives the matching
process status, and `report()` writes the message to the stream it belongs on.

The package also includes:

- `pipex.libft`, with small helpers in `chars`, `memory`, `strings`, `lists`
  (`Node`, `LinkedList`) and `output`;
- `pipex.printf`, with `format_message` and `printf` for the `%s %c %d %i %u %p
  %x %X %%` conversions.

## What it does not do

`pipex` joins exactly two commands. It does not support longer pipelines,
here-documents, appending to the output file, shell quoting, or variable
expansion in commands.

## Tests

    pip install -e ".[test]"
    pytest