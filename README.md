# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file. This is the same as the
shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To install the test dependencies too:

```sh
pip install ".[test]"
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The tool takes exactly four arguments. With any other number it does
nothing and exits with status 2.

### Running commands

- Each command string is split on spaces and empty words are dropped.
  Quotes and backslashes get no special treatment.
- The pipeline first tries the command name as a path. It is used if it is
  executable and is not a directory. Otherwise each non-empty directory in
  `PATH` is tried in order, as `directory/name`.
- The output file is opened for writing, created with mode `0644` if it
  does not exist, and truncated if it does.
- Both commands run at the same time. The tool waits for both to finish and
  exits with the exit status of the second command. If the second command
  was ended by a signal, the tool exits with 0.

### Errors

All messages go to standard error and start with `Pipex: `.

- **Input file cannot be opened.** The message is
  `Pipex: <infile>: <reason>` and the first command is not started. The
  second command still runs, with empty input.
- **Output file cannot be opened.** The message is
  `Pipex: <outfile>: <reason>`. The second command is not started, and the
  exit status is 1.
- **Command not found.** The message is
  `Pipex: <name>: command not found`. The same message is given when a
  command cannot be started. If this happens to the second command, the
  exit status is 127.
- **Pipe cannot be created.** The message is `Pipex: Pipe failed` and the
  exit status is 1.

### What it does not do

`pipex` always joins exactly two commands. It has no here-document input
and no append mode for the output file. It does not interpret shell syntax
such as quoting, globbing, variables or redirections inside the command
strings.

## Library use

You can also run the pipeline from Python:

```python
from pipex.pipeline import run

status = run("input.txt", "grep error", "wc -l", "count.txt")
```

`run` takes an optional fifth argument, `env`. This is a mapping that is used
as the environment of both commands and for the `PATH` lookup. It defaults
to `os.environ`. If the pipe cannot be created, `run` raises
`pipex.pipeline.PipexError`.

The command lookup is available on its own:

- `search_path(env)` returns the non-empty directories in `env["PATH"]`. If
  `PATH` is not set, it returns an empty list.
- `split_command(command)` splits a command string into words.
- `find_command(name, directories)` returns the path of the executable. If
  there is none, it raises `CommandNotFound`, a subclass of `PipexError`.
  The exception has the attributes `name` and `status`, which is 127.

The command line entry point is `pipex.pipeline.main(argv=None)`. It returns
the exit status instead of exiting.

### Helper modules

The package also holds some small helpers:

- `pipex.strutil`:
  - `split`, which splits on a single character and drops empty fields.
  - `substr`, `strtrim`, `strjoin`, `strjoin3` and `super_strjoin`.
- `pipex.search`:
  - `strnstr`, `strchr` and `strrchr` return an index or `None`.
  - `strncmp` returns a code difference. A negative `n` means no limit.
- `pipex.convert`:
  - `atoi`, which reads a leading decimal integer and gives 0 when there
    are no digits.
  - `itoa`, for 32-bit signed integers. It raises `OverflowError` outside
    that range.
- `pipex.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. These work on integer character
  codes.
- `pipex.fdio`: `put_char`, `put_str`, `put_endl` and `put_nbr`. These write
  to raw file descriptors.
- `pipex.memory`: `memchr` and `memcmp`, which work on the first `n` bytes
  of a buffer.
- `pipex.mapping`:
  - `strmapi`, which builds a new string.
  - `striteri`, which changes a mutable sequence of characters in place.
- `pipex.chain`: a singly linked list, `LinkedList`, with its `Node`.
  - `push_front`, `push_back`, `last` and `pop_front`.
  - `clear`, `for_each` and `map`.
  - `len()` and iteration.