"""Locating and starting the commands of a pipeline."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Mapping
from typing import IO, Union

from .textutil import split

DEFAULT_SEARCH_PATHS: tuple[str, ...] = ("/bin", "/usr/bin")

_Stream = Union[int, IO, None]


class PipexError(Exception):
    """Base error for pipeline failures."""


class CommandNotFoundError(PipexError):
    """Raised when a command cannot be found or started."""

    def __init__(self, command: str, reason: str = "command not found"):
        super().__init__(f"{command}: {reason}")
        self.command = command


def parse_command(text: str) -> list[str]:
    """Split a command string on spaces into its argument list."""
    args = split(text, " ")
    if not args:
        raise CommandNotFoundError(text, "empty command")
    return args


def find_executable(name: str, search_paths: Iterable[str] | None = None) -> str:
    """Return the first '<dir>/<name>' that is executable, searching in order."""
    paths = DEFAULT_SEARCH_PATHS if search_paths is None else search_paths
    for directory in paths:
        candidate = f"{os.fspath(directory)}/{name}"
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFoundError(name)


def spawn(
    text: str,
    stdin: _Stream = None,
    stdout: _Stream = None,
    env: Mapping[str, str] | None = None,
    search_paths: Iterable[str] | None = None,
) -> subprocess.Popen:
    """Start the command described by *text* with the given streams."""
    args = parse_command(text)
    path = find_executable(args[0], search_paths)
    try:
        return subprocess.Popen(
            args,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env) if env is not None else None,
        )
    except OSError as exc:
        raise CommandNotFoundError(args[0], exc.strerror or str(exc)) from exc