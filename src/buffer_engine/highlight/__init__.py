"""Lexical highlighting: tags, options, file types and the classifier."""

from .classifier import classify, is_ascii_digit, is_separator
from .options import FILE_TYPES, PLAIN, FileType, HighlightingOptions
from .tags import HighlightTag

__all__ = [
    "FILE_TYPES",
    "PLAIN",
    "FileType",
    "HighlightTag",
    "HighlightingOptions",
    "classify",
    "is_ascii_digit",
    "is_separator",
]
