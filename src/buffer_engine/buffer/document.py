"""Ordered list of lines with file backing, editing and search."""

from __future__ import annotations

import io
import os
from typing import IO, Iterable, List, Optional, Tuple, Union

from buffer_engine.config import EngineConfig, load_config
from buffer_engine.highlight import FileType, HighlightTag
from buffer_engine.runtime import telemetry

from .errors import DocumentIOError, PathLike
from .line import Line
from .types import Position, SearchDirection

LINE_TERMINATORS = frozenset({"\n", "\r\n", "\r"})


def _split_lines(text: str) -> List[str]:
    """Split on ``\\n``; a trailing terminator does not start a new line."""

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Document:
    """The rows of one editing session plus its dirty flag and file name.

    Row indices are dense: inserting or removing a row shifts every later
    index. Rows carry no reference back to the document.
    """

    def __init__(
        self,
        rows: Optional[Iterable[Line]] = None,
        *,
        file_name: Optional[PathLike] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self._rows: List[Line] = list(rows or [])
        self._dirty = False
        self._config = config or load_config()
        self._file_name = file_name
        self._file_type = FileType.from_file_name(
            os.fspath(file_name) if file_name else None
        )
        self.highlight()

    # ------------------------------------------------------------------
    # loading and saving

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        file_name: Optional[PathLike] = None,
        config: Optional[EngineConfig] = None,
    ) -> "Document":
        rows = [Line(value) for value in _split_lines(text)]
        return cls(rows, file_name=file_name, config=config)

    @classmethod
    def from_stream(
        cls,
        stream: Union[IO[str], IO[bytes]],
        *,
        file_name: Optional[PathLike] = None,
        config: Optional[EngineConfig] = None,
    ) -> "Document":
        """Read ``stream`` to the end and build a document from it.

        Binary streams are decoded with the configured encoding.
        """

        config = config or load_config()
        with telemetry.span(
            "document::load",
            component="document",
            metadata={"file_name": file_name or "<stream>"},
        ) as handle:
            try:
                data = stream.read()
                text = (
                    data.decode(config.encoding)
                    if isinstance(data, (bytes, bytearray))
                    else data
                )
            except (OSError, UnicodeDecodeError) as exc:
                raise DocumentIOError(
                    f"Could not read {file_name or 'stream'}: {exc}",
                    path=file_name,
                    cause=exc,
                ) from exc
            document = cls.from_text(text, file_name=file_name, config=config)
            handle.add_metadata("rows", len(document))
        telemetry.record_event(
            "document.loaded",
            data={"file_name": file_name or "<stream>", "rows": len(document)},
        )
        return document

    @classmethod
    def open(
        cls, path: PathLike, *, config: Optional[EngineConfig] = None
    ) -> "Document":
        try:
            handle = io.open(path, "rb")
        except OSError as exc:
            telemetry.record_event(
                "document.open_failed",
                level="warning",
                data={"file_name": path, "error": exc},
            )
            raise DocumentIOError(
                f"Could not open {os.fspath(path)}: {exc}", path=path, cause=exc
            ) from exc
        with handle:
            return cls.from_stream(handle, file_name=path, config=config)

    def save(self) -> bool:
        """Overwrite the backing file with every row plus a terminator.

        Returns ``False`` without touching the disk when no file name is set.
        The dirty flag is only cleared once the write succeeded.
        """

        if self._file_name is None:
            return False

        path = self._file_name
        with telemetry.span(
            "document::save",
            component="document",
            metadata={"file_name": path, "rows": len(self._rows)},
        ):
            newline = self._config.newline
            try:
                # Encode everything before the file is truncated.
                payload = "".join(row.text + newline for row in self._rows).encode(
                    self._config.encoding
                )
                with io.open(path, "wb") as handle:
                    handle.write(payload)
            except (OSError, UnicodeEncodeError) as exc:
                raise DocumentIOError(
                    f"Could not write {os.fspath(path)}: {exc}", path=path, cause=exc
                ) from exc
        self._dirty = False
        telemetry.record_event(
            "document.saved", data={"file_name": path, "rows": len(self._rows)}
        )
        return True

    # ------------------------------------------------------------------
    # accessors

    @property
    def file_name(self) -> Optional[PathLike]:
        return self._file_name

    @file_name.setter
    def file_name(self, value: Optional[PathLike]) -> None:
        self._file_name = value
        file_type = FileType.from_file_name(os.fspath(value) if value else None)
        if file_type != self._file_type:
            self._file_type = file_type
            self.highlight()

    @property
    def file_type(self) -> FileType:
        return self._file_type

    @property
    def config(self) -> EngineConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._rows)

    def row(self, y: int) -> Optional[Line]:
        if 0 <= y < len(self._rows):
            return self._rows[y]
        return None

    def row_length(self, y: int) -> int:
        line = self.row(y)
        return line.length if line is not None else 0

    def render(self, y: int, start: int, end: int) -> str:
        """Visible text of row ``y`` with the configured tab replacement."""

        line = self.row(y)
        if line is None:
            return ""
        return line.render(start, end, tab=self._config.tab_replacement)

    def segments(
        self, y: int, start: int, end: int
    ) -> List[Tuple[HighlightTag, str]]:
        line = self.row(y)
        if line is None:
            return []
        return line.segments(start, end, tab=self._config.tab_replacement)

    def is_empty(self) -> bool:
        return not self._rows

    def is_dirty(self) -> bool:
        return self._dirty

    # ------------------------------------------------------------------
    # editing

    def _rehighlight(self, *rows: int) -> None:
        options = self._file_type.options
        for y in rows:
            line = self.row(y)
            if line is not None:
                line.highlight(options)

    def insert(self, at: Position, character: str) -> None:
        if character in LINE_TERMINATORS:
            self.insert_newline(at)
            return
        if not character or at.y > len(self._rows):
            return

        with telemetry.span(
            "document::insert",
            component="document",
            metadata={"x": at.x, "y": at.y},
        ):
            if at.y == len(self._rows):
                line = Line()
                line.insert(0, character)
                self._rows.append(line)
            else:
                self._rows[at.y].insert(at.x, character)
            self._dirty = True
            self._rehighlight(at.y)

    def delete(self, at: Position) -> None:
        total = len(self._rows)
        if at.y >= total:
            return
        line = self._rows[at.y]
        joins_next = at.x == line.length and at.y + 1 < total
        if not joins_next and at.x >= line.length:
            return

        with telemetry.span(
            "document::delete",
            component="document",
            metadata={"x": at.x, "y": at.y, "join": joins_next},
        ):
            if joins_next:
                line.append(self._rows.pop(at.y + 1))
            else:
                line.delete(at.x)
            self._dirty = True
            self._rehighlight(at.y)

    def insert_newline(self, at: Position) -> None:
        total = len(self._rows)
        if at.y > total:
            return

        with telemetry.span(
            "document::insert_newline",
            component="document",
            metadata={"x": at.x, "y": at.y},
        ):
            if at.y == total:
                self._rows.append(Line())
            else:
                remainder = self._rows[at.y].split(at.x)
                self._rows.insert(at.y + 1, remainder)
                self._rehighlight(at.y, at.y + 1)
            self._dirty = True

    # ------------------------------------------------------------------
    # search and highlighting

    def find(
        self,
        query: str,
        at: Optional[Position] = None,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[Position]:
        """Locate ``query`` starting at ``at`` and walking rows in ``direction``.

        Without ``at`` the search runs forward from the top of the document.
        """

        if at is None:
            at, direction = Position(0, 0), SearchDirection.FORWARD
        if at.y >= len(self._rows):
            return None

        forward = direction is SearchDirection.FORWARD
        rows = range(at.y, len(self._rows)) if forward else range(at.y, -1, -1)
        column = at.x
        for y in rows:
            line = self._rows[y]
            if y != at.y:
                column = 0 if forward else line.length
            x = line.find(query, column, direction)
            if x is not None:
                return Position(x, y)
        return None

    def highlight(self, word: Optional[str] = None) -> None:
        options = self._file_type.options
        for line in self._rows:
            line.highlight(options, word)


__all__ = ["Document"]
