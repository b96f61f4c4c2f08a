from __future__ import annotations

import pytest

from buffer_engine import graphemes
from buffer_engine.buffer import Position, SearchDirection


def test_position_rejects_negative_coordinates() -> None:
    with pytest.raises(ValueError):
        Position(-1, 0)
    with pytest.raises(ValueError):
        Position(0, -1)


def test_positions_order_row_first() -> None:
    assert Position(5, 0) < Position(0, 1)
    assert Position(1, 2) < Position(3, 2)
    assert Position(3, 2) == Position(x=3, y=2)
    assert max(Position(9, 0), Position(0, 1)) == Position(0, 1)


def test_search_direction_values() -> None:
    assert SearchDirection("forward") is SearchDirection.FORWARD
    assert SearchDirection.BACKWARD.value == "backward"


def test_grapheme_helpers() -> None:
    text = "ae\u0301b"

    assert graphemes.count(text) == 3
    assert graphemes.split(text) == ["a", "e\u0301", "b"]
    assert graphemes.column_at_offset(text, 1) == 1
    assert graphemes.column_at_offset(text, 2) is None
    assert graphemes.column_at_offset(text, 3) == 2
    assert graphemes.column_at_offset(text, 4) is None
