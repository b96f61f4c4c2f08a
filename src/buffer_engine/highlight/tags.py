"""Lexical categories assigned to each grapheme of a line."""

from __future__ import annotations

from enum import Enum


class HighlightTag(str, Enum):
    """Per-grapheme classification produced by a highlight pass."""

    NONE = "none"
    NUMBER = "number"
    MATCH = "match"
    STRING = "string"
    CHARACTER = "character"
    COMMENT = "comment"
    PRIMARY_KEYWORD = "primary_keyword"
    SECONDARY_KEYWORD = "secondary_keyword"
