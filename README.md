# pipex

`pipex` connects commands the way a shell pipe does. It reads from an input
file and passes the data through each command in turn. The output of the last
command goes to an output file.

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1" "cmd2" ... "cmdN" outfile
```

This behaves much like the shell line

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

For example:

```
pipex notes.txt "grep todo" "wc -l" count.txt
```

- Each command string is split on spaces. Runs of spaces count as one
  separator.
- The program name is looked up in `/bin` and then in `/usr/bin`. Only
  regular files that are executable match.
- The commands inherit the current environment.
- The output file is created with mode 0644, or truncated if it already
  exists.

If the input file cannot be opened, or the output file cannot be created,
`pipex` prints an error and exits with status 1.

If a command cannot be found or started, `pipex` reports it on standard error
and goes on. The command after it gets empty input. The exit status of `pipex`
is 0 in that case, and also when a command exits with a failure status.

With fewer than four arguments, `pipex` prints a usage message on standard
error and exits with status 1. In here-document mode it needs five.

### Here-documents

If the first argument is `here_doc`, the second argument is a limiter word.
Input then comes from standard input instead of from a file:

```
pipex here_doc END "cat" "tr a-z A-Z" out.txt
```

A `> ` prompt is written to standard output before each line. Reading stops at
a line equal to the limiter, or at end of input. The lines collected are
stored in a file named `pipex.tmp` in the current directory, and that file is
fed to the first command. The file is removed when the run ends.

### What it does not do

There is no quoting, escaping, globbing or variable expansion in command
strings. Programs are not looked up through `PATH`, only in `/bin` and
`/usr/bin`. Standard error of the commands is not redirected. The output file
is always truncated; there is no append mode.

## Library use

The same behaviour is available from Python:

```python
from pipex.pipeline import run_pipeline

statuses = run_pipeline("notes.txt", ["grep todo", "wc -l"], "count.txt")
```

`run_pipeline(input_file, commands, output_file, env=None, search_paths=None)`
returns the exit status of every command, in order. A command that could not
be started counts as status 1. It raises `PipexError` if the input or output
file cannot be opened, and `ValueError` if no command is given.

`pipex.command` has the lower-level pieces:

- `parse_command(text)` splits a command string into its arguments. An empty
  command raises `CommandNotFoundError`.
- `find_executable(name, search_paths=None)` returns the first
  `<dir>/<name>` that is an executable file. It searches `/bin` and `/usr/bin`
  by default.
- `spawn(text, stdin=None, stdout=None, env=None, search_paths=None)` starts a
  single command and returns its `subprocess.Popen`.

`CommandNotFoundError` is raised when a program cannot be found or started. It
is a subclass of `PipexError` and keeps the name in its `command` attribute.

`pipex.heredoc` has the here-document reader:

- `read_heredoc(limiter, source=None, sink=None, prompt_stream=None)` copies
  lines from `source` (standard input by default) to `sink` until the limiter
  line. It returns the number of lines copied.
- `setup_heredoc(limiter, path="pipex.tmp", source=None, prompt_stream=None)`
  writes those lines to `path` and returns the path.

`pipex.cli` has `parse_arguments(args)`, which returns an `Invocation` with
`input_file`, `commands`, `output_file`, `limiter` and `is_heredoc`. It also
has `main(argv=None)`, which returns the exit status.

`pipex.textutil` has the small string helpers the tools use:

- `split`
- `atoi`, which parses like C's `atoi`
- `itoa`
- `strtrim`
- `strnstr`, which returns an index or `None`
- `substr`
- `skip`
- `is_space`
- `is_sign`

## Running the tests

```
pip install .[test]
pytest
```