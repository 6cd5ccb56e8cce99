"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import os
import sys
from typing import TextIO

HEREDOC_FILE = "pipex.tmp"
PROMPT = "> "


def read_heredoc(
    limiter: str,
    source: TextIO | None = None,
    sink: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> int:
    """Copy lines from *source* to *sink* until a line equal to *limiter*.

    A prompt is written to *prompt_stream* before every line is read. Reading
    also stops at end of input. Returns the number of lines copied.
    """
    source = sys.stdin if source is None else source
    prompt_stream = sys.stdout if prompt_stream is None else prompt_stream
    if sink is None:
        raise ValueError("a sink stream is required")
    copied = 0
    while True:
        prompt_stream.write(PROMPT)
        prompt_stream.flush()
        line = source.readline()
        if not line:
            break
        has_newline = line.endswith("\n")
        content = line[:-1] if has_newline else line
        if content == limiter:
            break
        sink.write(content)
        if has_newline:
            sink.write("\n")
        copied += 1
    return copied


def setup_heredoc(
    limiter: str,
    path: str | os.PathLike = HEREDOC_FILE,
    source: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> str:
    """Write here-document input into *path*, replacing it, and return the path."""
    fd = os.open(path, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "w") as sink:
        read_heredoc(limiter, source, sink, prompt_stream)
    return os.fspath(path)