from __future__ import annotations

import pytest

from citrs.cli.errors import EmptyInput
from citrs.cli.tokenizer import parse_line, split_args


def test_command_with_args():
    assert parse_line("cmd a b") == ("cmd", ["a", "b"])


def test_command_without_args():
    assert parse_line("cmd") == ("cmd", [])


def test_empty_line():
    with pytest.raises(EmptyInput, match="no command provided"):
        parse_line("")


def test_leading_space_means_empty_head():
    with pytest.raises(EmptyInput):
        parse_line(" cmd")


def test_quoted_argument_keeps_spaces():
    assert parse_line('cmd "a b" c') == ("cmd", ["a b", "c"])


def test_consecutive_spaces_collapse():
    assert parse_line("cmd  a") == ("cmd", ["a"])
    assert parse_line("cmd a    b ") == ("cmd", ["a", "b"])


def test_trailing_space_gives_no_args():
    assert parse_line("cmd ") == ("cmd", [])


def test_head_splits_on_any_whitespace():
    assert parse_line("cmd\ta b") == ("cmd", ["a", "b"])


def test_only_spaces_separate_args():
    assert parse_line("cmd a\tb") == ("cmd", ["a\tb"])


def test_quote_starts_new_argument_mid_token():
    assert split_args('a"b c"d') == ["a", "b c", "d"]


def test_unmatched_quote_is_lenient():
    assert parse_line('cmd "open ended') == ("cmd", ["open ended"])


def test_empty_quotes_produce_nothing():
    assert parse_line('cmd "" x') == ("cmd", ["x"])


def test_quotes_never_in_output():
    _, args = parse_line('say "hello world" "" "x"')
    assert all('"' not in a for a in args)
    assert args == ["hello world", "x"]
