"""Source code span value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LineColumn:
    """Position in a source file.

    Attributes:
        line: Line number (1-based, must be > 0)
        column: Column number (0-based, must be >= 0)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as line:column."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True, order=True)
class CodeSpan:
    """Start and end position of a syntax element.

    Attributes:
        start: First position of the element
        end: Position just past the element (must not precede start)
    """

    start: LineColumn
    end: LineColumn

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")

    @classmethod
    def of(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> CodeSpan:
        """Build span from four plain integers."""
        return cls(LineColumn(start_line, start_column), LineColumn(end_line, end_column))

    @property
    def line_count(self) -> int:
        """Number of lines covered (inclusive)."""
        return self.end.line - self.start.line + 1

    def __str__(self) -> str:
        """Format as start-end."""
        return f"{self.start}-{self.end}"
