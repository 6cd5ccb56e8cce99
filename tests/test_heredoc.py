import io

from pipex.heredoc import PROMPT, read_heredoc, setup_heredoc


def test_stops_at_limiter():
    source = io.StringIO("a\nb\nEOF\nc\n")
    sink = io.StringIO()
    prompts = io.StringIO()
    count = read_heredoc("EOF", source, sink, prompts)
    assert sink.getvalue() == "a\nb\n"
    assert count == 2
    assert prompts.getvalue() == PROMPT * 3


def test_stops_at_end_of_input():
    sink = io.StringIO()
    count = read_heredoc("EOF", io.StringIO("a\nb"), sink, io.StringIO())
    assert sink.getvalue() == "a\nb"
    assert count == 2


def test_limiter_must_match_whole_line():
    sink = io.StringIO()
    read_heredoc("EOF", io.StringIO("EOFX\n EOF\nEOF\n"), sink, io.StringIO())
    assert sink.getvalue() == "EOFX\n EOF\n"


def test_prompt_is_greater_than_sign():
    prompts = io.StringIO()
    read_heredoc("x", io.StringIO(""), io.StringIO(), prompts)
    assert prompts.getvalue() == "> "


def test_setup_writes_and_truncates(tmp_path):
    target = tmp_path / "pipex.tmp"
    target.write_text("old content that is long\n")
    result = setup_heredoc("END", target, io.StringIO("hello\nEND\n"), io.StringIO())
    assert result == str(target)
    assert target.read_text() == "hello\n"