"""Run ``cmd1 < infile | cmd2 > outfile`` as two child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Optional, Union

from pipex.strutil import split, strjoin3

__all__ = [
    "PipexError",
    "CommandNotFound",
    "search_path",
    "split_command",
    "find_command",
    "run",
    "main",
]

_PREFIX = "Pipex: "
_OPEN_FAILURE = 1


class PipexError(Exception):
    """A failure of the pipeline itself, such as a pipe that cannot be made."""


class CommandNotFound(PipexError):
    """No executable was found for a command name."""

    status = 127

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


def search_path(env: Mapping[str, str]) -> list[str]:
    """The non-empty directories listed in the ``PATH`` of ``env``."""
    value = env.get("PATH")
    if value is None:
        return []
    return split(value, ":")


def split_command(command: str) -> list[str]:
    """Split a command line into its words on spaces."""
    return split(command, " ")


def _is_runnable(path: str) -> bool:
    return bool(path) and os.access(path, os.X_OK) and not os.path.isdir(path)


def find_command(name: str, directories: Sequence[str]) -> str:
    """Path of the executable for ``name``.

    ``name`` itself is tried first, then ``directory/name`` for each
    directory in order. Raises CommandNotFound when none is executable.
    """
    if _is_runnable(name):
        return name
    for directory in directories:
        candidate = strjoin3(directory, "/", name)
        if _is_runnable(candidate):
            return candidate
    raise CommandNotFound(name)


def _report(message: str) -> None:
    sys.stderr.write(_PREFIX + message)
    sys.stderr.flush()


def _launch(
    command: str,
    directories: Sequence[str],
    env: Mapping[str, str],
    stdin: Union[int, IO[bytes]],
    stdout: int,
) -> Union[subprocess.Popen, int]:
    argv = split_command(command)
    name = argv[0] if argv else ""
    try:
        path = find_command(name, directories)
        return subprocess.Popen(
            argv, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except CommandNotFound as exc:
        _report(f"{exc}\n")
        return exc.status
    except OSError:
        _report(f"{CommandNotFound(name)}\n")
        return CommandNotFound.status


def _first_stage(
    infile: str,
    command: str,
    directories: Sequence[str],
    env: Mapping[str, str],
    stdout: int,
) -> Union[subprocess.Popen, int]:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        _report(f"{infile}: {exc.strerror}\n")
        return _OPEN_FAILURE
    with source:
        return _launch(command, directories, env, source, stdout)


def _open_outfile(outfile: str) -> Optional[int]:
    try:
        return os.open(outfile, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, 0o644)
    except OSError as exc:
        _report(f"{outfile}: {exc.strerror}\n")
        return None


def _status(stage: Union[subprocess.Popen, int]) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A child killed by a signal has no exit status; report success as 0.
    return code if code >= 0 else 0


def run(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` to ``first``, pipe its output to ``second`` and write
    that to ``outfile``.

    Returns the exit status of the second command: 127 when it is not
    found, 1 when ``outfile`` cannot be opened.
    """
    environment = dict(os.environ if env is None else env)
    directories = search_path(environment)
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        raise PipexError("Pipe failed") from exc

    producer: Union[subprocess.Popen, int] = _OPEN_FAILURE
    consumer: Union[subprocess.Popen, int] = _OPEN_FAILURE
    try:
        producer = _first_stage(infile, first, directories, environment, write_end)
        out_fd = _open_outfile(outfile)
        if out_fd is not None:
            try:
                consumer = _launch(second, directories, environment, read_end, out_fd)
            finally:
                os.close(out_fd)
    finally:
        os.close(read_end)
        os.close(write_end)

    _status(producer)
    return _status(consumer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return 2
    try:
        return run(*args)
    except PipexError as exc:
        _report(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())