"""Left-to-right lexical classifier for a single line."""

from __future__ import annotations

import string
from typing import Collection, List, Optional, Sequence

from buffer_engine import graphemes as gr

from .options import HighlightingOptions
from .tags import HighlightTag

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ASCII_PUNCTUATION = frozenset(string.punctuation)
_ASCII_DIGITS = frozenset(string.digits)


def is_separator(cluster: str) -> bool:
    return cluster in _ASCII_PUNCTUATION or cluster in _ASCII_WHITESPACE


def is_ascii_digit(cluster: str) -> bool:
    return cluster in _ASCII_DIGITS


def _starts_with(clusters: Sequence[str], index: int, token: str) -> bool:
    width = len(token)
    return "".join(clusters[index : index + width]) == token


def _keyword_length(
    clusters: Sequence[str],
    index: int,
    keywords: Sequence[str],
    match_starts: Collection[int],
) -> int:
    total = len(clusters)
    for keyword in keywords:
        end = index + len(keyword)
        if end > total or not _starts_with(clusters, index, keyword):
            continue
        if end < total and not is_separator(clusters[end]):
            continue
        if any(column in match_starts for column in range(index + 1, end)):
            continue
        return len(keyword)
    return 0


def _closing_quote_state(span: Sequence[str], quote: str) -> Optional[str]:
    """Return ``quote`` if the string stays open after ``span``, else ``None``."""

    escaped = False
    for cluster in span:
        if escaped:
            escaped = False
        elif cluster == "\\":
            escaped = True
        elif cluster == quote:
            return None
    return quote


def classify(
    clusters: Sequence[str],
    options: HighlightingOptions,
    word: Optional[str] = None,
    matches: Collection[int] = (),
) -> List[HighlightTag]:
    """Return one tag per grapheme in ``clusters``.

    ``matches`` holds the start columns of non-overlapping occurrences of
    ``word``. Those spans are tagged ``MATCH`` before anything else is
    considered; the remaining columns go through the number, string,
    character, comment and keyword rules enabled in ``options``.
    """

    tags: List[HighlightTag] = []
    match_starts = frozenset(matches) if word else frozenset()
    word_length = gr.count(word) if word else 0
    total = len(clusters)

    prev_is_separator = True
    quote: Optional[str] = None
    quote_tag = HighlightTag.STRING
    in_comment = False
    index = 0

    while index < total:
        if index in match_starts:
            end = min(index + word_length, total)
            tags.extend([HighlightTag.MATCH] * (end - index))
            if quote is not None:
                quote = _closing_quote_state(clusters[index:end], quote)
            prev_is_separator = is_separator(clusters[end - 1])
            index = end
            continue

        current = clusters[index]
        previous = tags[-1] if tags else HighlightTag.NONE

        if in_comment:
            tags.append(HighlightTag.COMMENT)
        elif quote is not None:
            tags.append(quote_tag)
            following = index + 1
            if current == "\\" and following < total and following not in match_starts:
                tags.append(quote_tag)
                prev_is_separator = is_separator(clusters[following])
                index += 2
                continue
            if current == quote:
                quote = None
        elif options.comments and _starts_with(clusters, index, options.comment_prefix):
            in_comment = True
            tags.append(HighlightTag.COMMENT)
        elif options.strings and current in options.string_quotes:
            quote, quote_tag = current, HighlightTag.STRING
            tags.append(quote_tag)
        elif options.characters and current == "'":
            quote, quote_tag = current, HighlightTag.CHARACTER
            tags.append(quote_tag)
        elif options.numbers and (
            (is_ascii_digit(current) and (prev_is_separator or previous is HighlightTag.NUMBER))
            or (current == "." and previous is HighlightTag.NUMBER)
        ):
            tags.append(HighlightTag.NUMBER)
        else:
            width = 0
            if prev_is_separator:
                for keywords, tag in (
                    (options.primary_keywords, HighlightTag.PRIMARY_KEYWORD),
                    (options.secondary_keywords, HighlightTag.SECONDARY_KEYWORD),
                ):
                    width = _keyword_length(clusters, index, keywords, match_starts)
                    if width:
                        tags.extend([tag] * width)
                        break
            if width:
                prev_is_separator = False
                index += width
                continue
            tags.append(HighlightTag.NONE)

        prev_is_separator = is_separator(current)
        index += 1

    return tags


__all__ = ["classify", "is_separator", "is_ascii_digit"]
