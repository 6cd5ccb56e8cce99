import os
import subprocess

import pytest

from pipex.command import (
    CommandNotFoundError,
    PipexError,
    find_executable,
    parse_command,
    spawn,
)


def _script(directory, name, body, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    os.chmod(path, mode)
    return path


def test_parse_command_splits_on_spaces():
    assert parse_command("ls  -l   -a") == ["ls", "-l", "-a"]


def test_parse_command_empty_raises():
    with pytest.raises(CommandNotFoundError):
        parse_command("   ")


def test_not_found_is_pipex_error():
    with pytest.raises(PipexError):
        find_executable("no-such-command-here", [])


def test_find_executable_in_given_dir(tmp_path):
    script = _script(tmp_path, "tool", "exit 0")
    assert find_executable("tool", [str(tmp_path)]) == f"{tmp_path}/tool"
    assert os.path.samefile(find_executable("tool", [tmp_path]), script)


def test_find_executable_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _script(first, "tool", "exit 0")
    _script(second, "tool", "exit 0")
    found = find_executable("tool", [str(first), str(second)])
    assert found.startswith(str(first))


def test_find_executable_skips_non_executable(tmp_path):
    _script(tmp_path, "plain", "exit 0", mode=0o644)
    with pytest.raises(CommandNotFoundError) as info:
        find_executable("plain", [str(tmp_path)])
    assert info.value.command == "plain"


def test_spawn_passes_arguments(tmp_path):
    _script(tmp_path, "say", 'echo "$0 $1 $2"')
    proc = spawn("say hello there", stdout=subprocess.PIPE, search_paths=[str(tmp_path)])
    out, _ = proc.communicate()
    assert proc.returncode == 0
    assert out.decode().split()[1:] == ["hello", "there"]


def test_spawn_uses_stdin(tmp_path):
    _script(tmp_path, "copy", "exec cat")
    proc = spawn(
        "copy",
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        search_paths=[str(tmp_path)],
    )
    out, _ = proc.communicate(b"some data\n")
    assert out == b"some data\n"


def test_spawn_passes_environment(tmp_path):
    _script(tmp_path, "showenv", 'printf "%s" "$PIPEX_VALUE"')
    proc = spawn(
        "showenv",
        stdout=subprocess.PIPE,
        env={"PIPEX_VALUE": "marker"},
        search_paths=[str(tmp_path)],
    )
    out, _ = proc.communicate()
    assert out == b"marker"


def test_spawn_missing_command_raises(tmp_path):
    with pytest.raises(CommandNotFoundError):
        spawn("absent -x", search_paths=[str(tmp_path)])