"""Command-line entry point: pipex file1 cmd1 ... cmdN file2."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .command import PipexError
from .heredoc import HEREDOC_FILE, setup_heredoc
from .pipeline import run_pipeline

HEREDOC_KEYWORD = "here_doc"
USAGE = 'Usage: pipex file1 "cmd1" ... "cmdN" file2'
HEREDOC_USAGE = 'Usage: pipex here_doc LIMITER "cmd1" ... "cmdN" file2'


@dataclass(frozen=True)
class Invocation:
    """What the command line asks for."""

    input_file: str
    commands: tuple[str, ...]
    output_file: str
    limiter: str | None = None

    @property
    def is_heredoc(self) -> bool:
        return self.limiter is not None


def parse_arguments(args: Sequence[str]) -> Invocation:
    """Interpret the arguments that follow the program name."""
    args = list(args)
    if len(args) < 4:
        raise PipexError(USAGE)
    if args[0] == HEREDOC_KEYWORD:
        if len(args) < 5:
            raise PipexError(HEREDOC_USAGE)
        return Invocation(
            input_file=HEREDOC_FILE,
            commands=tuple(args[2:-1]),
            output_file=args[-1],
            limiter=args[1],
        )
    return Invocation(
        input_file=args[0],
        commands=tuple(args[1:-1]),
        output_file=args[-1],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run pipex with *argv* (without the program name); return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        invocation = parse_arguments(args)
    except PipexError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1

    try:
        if invocation.is_heredoc:
            setup_heredoc(invocation.limiter, invocation.input_file)
        run_pipeline(
            invocation.input_file,
            invocation.commands,
            invocation.output_file,
            env=os.environ,
        )
    except (PipexError, OSError) as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1
    finally:
        if invocation.is_heredoc:
            try:
                os.unlink(invocation.input_file)
            except FileNotFoundError:
                pass
    return 0


if __name__ == "__main__":
    sys.exit(main())