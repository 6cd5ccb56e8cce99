"""Running a chain of commands between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Mapping
from contextlib import ExitStack

from .command import CommandNotFoundError, PipexError, spawn

FAILURE_STATUS = 1


def _open_output(path: str | os.PathLike):
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"{os.fspath(path)}: {exc.strerror}") from exc
    return os.fdopen(fd, "wb")


def run_pipeline(
    input_file: str | os.PathLike,
    commands: Iterable[str],
    output_file: str | os.PathLike,
    env: Mapping[str, str] | None = None,
    search_paths: Iterable[str] | None = None,
) -> list[int]:
    """Run *commands* as a pipeline reading *input_file* and writing *output_file*.

    Returns the exit status of every command, in order. A command that cannot
    be started is reported on stderr and counted as failed; the command after
    it then reads empty input.
    """
    commands = list(commands)
    if not commands:
        raise ValueError("at least one command is required")
    if search_paths is not None:
        search_paths = list(search_paths)

    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(input_file, "rb"))
        except OSError as exc:
            raise PipexError(f"{os.fspath(input_file)}: {exc.strerror}") from exc
        sink = stack.enter_context(_open_output(output_file))

        processes: list[subprocess.Popen | None] = []
        upstream = source
        last_index = len(commands) - 1
        for index, text in enumerate(commands):
            is_last = index == last_index
            stdin = upstream if upstream is not None else subprocess.DEVNULL
            stdout = sink if is_last else subprocess.PIPE
            try:
                process = spawn(text, stdin, stdout, env, search_paths)
            except CommandNotFoundError as exc:
                print(f"pipex: {exc}", file=sys.stderr)
                process = None
            if upstream is not None and upstream is not source:
                upstream.close()
            upstream = process.stdout if process is not None and not is_last else None
            processes.append(process)

        return [
            process.wait() if process is not None else FAILURE_STATUS
            for process in processes
        ]