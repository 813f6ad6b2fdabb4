from __future__ import annotations

from governance.utils.commands import (
    CandidateLines,
    Command,
    Commands,
    extract_commands,
    match_command,
    normalize_line_endings,
    strip_html_comments,
)


def test_normalize_line_endings_handles_crlf_and_cr() -> None:
    assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


def test_strip_html_comments_spans_newlines_non_greedy() -> None:
    text = "keep\n<!-- /triage accepted\nstill hidden -->\n/kind fix <!-- x --> tail"
    assert strip_html_comments(text) == "keep\n\n/kind fix  tail"


def test_candidate_lines_is_restartable() -> None:
    lines = CandidateLines("one\ntwo\n")
    assert list(lines) == ["one", "two", ""]
    assert list(lines) == ["one", "two", ""]


def test_candidate_lines_of_empty_text_is_empty() -> None:
    assert list(CandidateLines("")) == []


def test_match_command_requires_single_leading_slash() -> None:
    assert match_command("/triage accepted") == Command(text="/triage accepted")
    assert match_command("//triage accepted") is None
    assert match_command("/") is None
    assert match_command(" /triage accepted") is None
    assert match_command("please /triage accepted") is None


def test_extract_commands_preserves_order_and_ignores_hidden() -> None:
    body = "Thanks!\r\n/triage accepted\r\n<!--\r\n/kind fix\r\n-->\r\n/kind feature\n// not a command"
    commands = extract_commands(body)
    assert [c.text for c in commands] == ["/triage accepted", "/kind feature"]
    assert all(c.args == () for c in commands)


def test_extract_commands_of_empty_input() -> None:
    assert len(extract_commands("")) == 0
    assert not extract_commands(None)  # type: ignore[arg-type]


def test_prefix_computes_args_relative_to_prefix() -> None:
    commands = Commands([Command("/triage a c"), Command("/kind fix"), Command("/triage   b  ")])
    selected = commands.prefix("/triage")
    assert [c.args for c in selected] == [("a", "c"), ("b",)]
    assert [c.text for c in selected] == ["/triage a c", "/triage   b  "]


def test_prefix_without_arguments_yields_empty_args() -> None:
    commands = Commands([Command("/triage"), Command("/triage-remove accepted")])
    selected = commands.prefix("/triage")
    assert [c.args for c in selected] == [(), ()]
    assert commands.prefix("/triage-remove")[0].args == ("accepted",)


def test_prefix_is_case_sensitive() -> None:
    commands = Commands([Command("/Triage accepted")])
    assert commands.prefix("/triage") == ()


def test_prefix_splits_on_single_spaces() -> None:
    command = Command("/triage a  b").with_prefix("/triage")
    assert command.args == ("a", "", "b")
