"""Highlighting switches and file type detection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

RUST_KEYWORDS = (
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    "dyn", "async", "await", "try",
)  # fmt: skip

RUST_TYPES = (
    "bool", "char", "i8", "i16", "i32", "i64", "isize", "u8", "u16", "u32",
    "u64", "usize", "f32", "f64", "str", "String", "Vec", "Option", "Result",
)  # fmt: skip

PYTHON_KEYWORDS = (
    "and", "as", "assert", "async", "await", "break", "class", "continue",
    "def", "del", "elif", "else", "except", "finally", "for", "from",
    "global", "if", "import", "in", "is", "lambda", "nonlocal", "not", "or",
    "pass", "raise", "return", "try", "while", "with", "yield",
)  # fmt: skip

PYTHON_CONSTANTS = ("True", "False", "None", "self", "cls")

C_KEYWORDS = (
    "auto", "break", "case", "continue", "default", "do", "else", "enum",
    "extern", "for", "goto", "if", "register", "return", "sizeof", "static",
    "struct", "switch", "typedef", "union", "volatile", "while", "NULL",
)  # fmt: skip

C_TYPES = (
    "int", "long", "double", "float", "char", "unsigned", "signed", "void",
    "short", "const", "bool",
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class HighlightingOptions:
    """Which lexical categories a highlight pass should recognise."""

    numbers: bool = False
    strings: bool = False
    string_quotes: tuple[str, ...] = ('"',)
    characters: bool = False
    comments: bool = False
    comment_prefix: str = "//"
    primary_keywords: tuple[str, ...] = ()
    secondary_keywords: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.comments and not self.comment_prefix:
            raise ValueError("comment_prefix cannot be empty when comments are on")


@dataclass(frozen=True, slots=True)
class FileType:
    name: str
    options: HighlightingOptions
    extensions: tuple[str, ...] = ()

    @classmethod
    def from_file_name(cls, file_name: Optional[str]) -> "FileType":
        """Pick a file type by extension; unknown names get ``PLAIN``."""

        if not file_name:
            return PLAIN
        extension = os.path.splitext(str(file_name))[1].lower()
        for file_type in FILE_TYPES:
            if extension in file_type.extensions:
                return file_type
        return PLAIN


PLAIN = FileType(name="No filetype", options=HighlightingOptions())

FILE_TYPES: tuple[FileType, ...] = (
    FileType(
        name="Rust",
        extensions=(".rs",),
        options=HighlightingOptions(
            numbers=True,
            strings=True,
            characters=True,
            comments=True,
            primary_keywords=RUST_KEYWORDS,
            secondary_keywords=RUST_TYPES,
        ),
    ),
    FileType(
        name="Python",
        extensions=(".py", ".pyi"),
        options=HighlightingOptions(
            numbers=True,
            strings=True,
            string_quotes=('"', "'"),
            comments=True,
            comment_prefix="#",
            primary_keywords=PYTHON_KEYWORDS,
            secondary_keywords=PYTHON_CONSTANTS,
        ),
    ),
    FileType(
        name="C",
        extensions=(".c", ".h", ".cc", ".cpp", ".hpp"),
        options=HighlightingOptions(
            numbers=True,
            strings=True,
            characters=True,
            comments=True,
            primary_keywords=C_KEYWORDS,
            secondary_keywords=C_TYPES,
        ),
    ),
)
