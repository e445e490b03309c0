"""Tests for domain/model/location.py."""

import pytest

from archrules.domain.model.location import CodeSpan, LineColumn


class TestLineColumn:
    """Tests for LineColumn creation and validation."""

    def test_valid(self) -> None:
        pos = LineColumn(3, 0)
        assert pos.line == 3
        assert pos.column == 0
        assert str(pos) == "3:0"

    def test_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            LineColumn(0, 0)

    def test_column_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            LineColumn(1, -1)

    def test_ordering(self) -> None:
        assert LineColumn(1, 5) < LineColumn(2, 0)
        assert LineColumn(2, 0) < LineColumn(2, 1)


class TestCodeSpan:
    """Tests for CodeSpan."""

    def test_of(self) -> None:
        span = CodeSpan.of(1, 2, 3, 4)
        assert span.start == LineColumn(1, 2)
        assert span.end == LineColumn(3, 4)

    def test_line_count_inclusive(self) -> None:
        assert CodeSpan.of(4, 0, 6, 1).line_count == 3
        assert CodeSpan.of(4, 0, 4, 9).line_count == 1

    def test_end_before_start_raises(self) -> None:
        with pytest.raises(ValueError, match="must not precede start"):
            CodeSpan.of(5, 0, 4, 0)

    def test_str(self) -> None:
        assert str(CodeSpan.of(1, 0, 2, 3)) == "1:0-2:3"
