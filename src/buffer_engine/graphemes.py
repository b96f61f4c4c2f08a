"""Grapheme-cluster helpers.

Every column and length exposed by the engine counts extended grapheme
clusters, never code points. Segmentation itself is delegated to the
``grapheme`` package.
"""

from __future__ import annotations

from typing import List, Optional

import grapheme


def split(text: str) -> List[str]:
    return list(grapheme.graphemes(text))


def count(text: str) -> int:
    return grapheme.length(text)


def column_at_offset(text: str, offset: int) -> Optional[int]:
    """Return the grapheme column starting at code point ``offset``.

    ``None`` means the offset lands inside a cluster (or past the end).
    """

    position = 0
    for column, cluster in enumerate(grapheme.graphemes(text)):
        if position == offset:
            return column
        if position > offset:
            return None
        position += len(cluster)
    return None


__all__ = ["split", "count", "column_at_offset"]
