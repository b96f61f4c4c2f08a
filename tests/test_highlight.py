from __future__ import annotations

from typing import Optional

import pytest

from buffer_engine.buffer import Line
from buffer_engine.highlight import (
    PLAIN,
    FileType,
    HighlightingOptions,
    HighlightTag,
    classify,
)

N = HighlightTag.NONE
NUM = HighlightTag.NUMBER
M = HighlightTag.MATCH
S = HighlightTag.STRING
C = HighlightTag.COMMENT
K1 = HighlightTag.PRIMARY_KEYWORD
K2 = HighlightTag.SECONDARY_KEYWORD

NUMBERS = HighlightingOptions(numbers=True)
RUST = FileType.from_file_name("main.rs").options


def highlight(
    text: str, options: HighlightingOptions, word: Optional[str] = None
) -> tuple[HighlightTag, ...]:
    line = Line(text)
    line.highlight(options, word)
    return line.tags


def test_match_tags_word_columns() -> None:
    tags = highlight("hello world", NUMBERS, "wor")

    assert tags[6:9] == (M, M, M)
    assert M not in tags[:6] + tags[9:]
    assert NUM not in tags


def test_match_wins_over_number() -> None:
    tags = highlight("x 123 123", NUMBERS, "123")

    assert tags == (N, N, M, M, M, N, M, M, M)


def test_numbers_outside_match_still_classified() -> None:
    tags = highlight("wor 42", NUMBERS, "wor")

    assert tags == (M, M, M, N, NUM, NUM)


def test_decimal_literal() -> None:
    assert highlight("pi 3.14", NUMBERS) == (N, N, N, NUM, NUM, NUM, NUM)


def test_digits_need_a_separator_before_them() -> None:
    assert highlight("abc123", NUMBERS) == (N,) * 6
    assert highlight("(7)", NUMBERS) == (N, NUM, N)


def test_numbers_disabled_leaves_everything_plain() -> None:
    assert highlight("1 2 3", HighlightingOptions()) == (N,) * 5


def test_non_overlapping_matches_advance_by_word_length() -> None:
    assert highlight("aaaa", HighlightingOptions(), "aa") == (M, M, M, M)
    assert highlight("aaa", HighlightingOptions(), "aa") == (M, M, N)


def test_classify_counts_graphemes_not_code_points() -> None:
    clusters = ["e\u0301", " ", "1"]

    assert classify(clusters, NUMBERS) == [N, N, NUM]


def test_string_literal_with_escape() -> None:
    options = HighlightingOptions(numbers=True, strings=True)

    assert highlight('say "hi 42"', options) == (N, N, N, N) + (S,) * 7
    assert highlight('"a\\"b"', options) == (S,) * 6


def test_rust_comment_and_keywords() -> None:
    assert highlight("x // 12", RUST) == (N, N, C, C, C, C, C)
    assert highlight("let x = 5;", RUST) == (K1, K1, K1, N, N, N, N, N, NUM, N)
    assert highlight("x: u32", RUST) == (N, N, N, K2, K2, K2)
    assert highlight("letter", RUST) == (N,) * 6


def test_match_inside_comment() -> None:
    assert highlight("// abc", RUST, "abc") == (C, C, C, M, M, M)


def test_character_literal() -> None:
    assert highlight("'a'", RUST) == (HighlightTag.CHARACTER,) * 3


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("main.rs", "Rust"),
        ("script.PY", "Python"),
        ("util.h", "C"),
        ("notes.txt", "No filetype"),
        (None, "No filetype"),
    ],
)
def test_file_type_detection(file_name: Optional[str], expected: str) -> None:
    assert FileType.from_file_name(file_name).name == expected


def test_python_uses_hash_comments() -> None:
    options = FileType.from_file_name("x.py").options

    assert highlight("# 1", options) == (C, C, C)
    assert highlight("'s'", options) == (S, S, S)


def test_plain_file_type_has_everything_off() -> None:
    assert PLAIN.options == HighlightingOptions()


def test_comments_require_a_prefix() -> None:
    with pytest.raises(ValueError):
        HighlightingOptions(comments=True, comment_prefix="")


def test_closing_quote_inside_match_ends_the_string() -> None:
    options = HighlightingOptions(strings=True)

    assert highlight('"ab" x', options, 'b"') == (S, S, M, M, N, N)
    assert highlight('"a\\"b" x', options, '\\"') == (S, S, M, M, S, S, N, N)
