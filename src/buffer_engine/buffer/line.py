"""A single row of text addressed by grapheme column."""

from __future__ import annotations

from typing import List, Optional, Tuple

from buffer_engine import graphemes as gr
from buffer_engine.highlight import HighlightingOptions, HighlightTag, classify

from .types import SearchDirection


class Line:
    """One line of a document, without its terminator.

    ``length`` always equals the number of grapheme clusters in ``text``; it
    is recomputed after every mutation. Mutations reset all tags to
    ``HighlightTag.NONE``; call ``highlight`` to classify again.
    """

    __slots__ = ("_text", "_length", "_tags")

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._length = 0
        self._tags: List[HighlightTag] = []
        self._refresh()

    @classmethod
    def from_text(cls, text: str) -> "Line":
        return cls(text)

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __len__(self) -> int:
        return self._length

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return self._length

    @property
    def tags(self) -> Tuple[HighlightTag, ...]:
        return tuple(self._tags)

    def is_empty(self) -> bool:
        return self._length == 0

    def _refresh(self) -> None:
        self._length = gr.count(self._text)
        self._tags = [HighlightTag.NONE] * self._length

    def _clamp(self, start: int, end: int) -> Tuple[int, int]:
        end = max(0, min(end, self._length))
        start = max(0, min(start, end))
        return start, end

    def render(self, start: int, end: int, *, tab: str = " ") -> str:
        """Return the visible text between columns ``[start, end)``.

        Tabs are shown as ``tab``; the stored text is left untouched.
        """

        start, end = self._clamp(start, end)
        clusters = gr.split(self._text)[start:end]
        return "".join(tab if cluster == "\t" else cluster for cluster in clusters)

    def segments(
        self, start: int, end: int, *, tab: str = " "
    ) -> List[Tuple[HighlightTag, str]]:
        """Group the rendered slice into runs sharing the same tag."""

        start, end = self._clamp(start, end)
        clusters = gr.split(self._text)
        runs: List[Tuple[HighlightTag, str]] = []
        for column in range(start, end):
            tag = self._tags[column] if column < len(self._tags) else HighlightTag.NONE
            cluster = tab if clusters[column] == "\t" else clusters[column]
            if runs and runs[-1][0] is tag:
                runs[-1] = (tag, runs[-1][1] + cluster)
            else:
                runs.append((tag, cluster))
        return runs

    def insert(self, at: int, character: str) -> None:
        if at >= self._length:
            self._text += character
        else:
            clusters = gr.split(self._text)
            clusters.insert(max(at, 0), character)
            self._text = "".join(clusters)
        self._refresh()

    def delete(self, at: int) -> None:
        if at < 0 or at >= self._length:
            return
        clusters = gr.split(self._text)
        del clusters[at]
        self._text = "".join(clusters)
        self._refresh()

    def append(self, other: "Line") -> None:
        self._text += other._text
        self._refresh()

    def split(self, at: int) -> "Line":
        """Keep the first ``at`` graphemes and return the rest as a new line."""

        clusters = gr.split(self._text)
        at = max(0, min(at, len(clusters)))
        remainder = Line("".join(clusters[at:]))
        self._text = "".join(clusters[:at])
        self._refresh()
        return remainder

    def find(
        self,
        query: str,
        at: int = 0,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[int]:
        """Return the grapheme column of ``query`` searching from ``at``.

        Forward looks at columns ``>= at``; backward only accepts matches that
        end at or before ``at``. Hits that start inside a cluster are skipped.
        """

        if not query or at < 0 or at > self._length:
            return None

        if direction is SearchDirection.FORWARD:
            start, end = at, self._length
        else:
            start, end = 0, at

        window = "".join(gr.split(self._text)[start:end])
        if direction is SearchDirection.FORWARD:
            offset = window.find(query)
            while offset != -1:
                column = gr.column_at_offset(window, offset)
                if column is not None:
                    return start + column
                offset = window.find(query, offset + 1)
        else:
            offset = window.rfind(query)
            while offset != -1:
                column = gr.column_at_offset(window, offset)
                if column is not None:
                    return start + column
                offset = window.rfind(query, 0, offset + len(query) - 1)
        return None

    def highlight(
        self, options: HighlightingOptions, word: Optional[str] = None
    ) -> None:
        matches: List[int] = []
        if word:
            width = gr.count(word)
            column = self.find(word, 0, SearchDirection.FORWARD)
            while column is not None:
                matches.append(column)
                column = self.find(word, column + width, SearchDirection.FORWARD)
        self._tags = classify(gr.split(self._text), options, word, matches)
