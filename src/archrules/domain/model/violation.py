"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.enums import ViolationKind
    from archrules.domain.model.location import CodeSpan


@dataclass(frozen=True, slots=True)
class RuleViolation:
    """One failing member of a rule or one forbidden dependency edge.

    Carries everything needed to render a point-in-file report without
    consulting the index again.

    Attributes:
        kind: What the violation is about
        message: Human-readable message
        subject: Simple name of the offending declaration or namespace
        file: Source file, relative to the project root when possible
        span: Exact span of the offending element
        label: Short label placed under the span
        suggestion: Fix suggestion
        details: Kind-specific context (trait, pattern, visibility, ...)
    """

    kind: ViolationKind
    message: str
    subject: str
    file: Path
    span: CodeSpan
    label: str
    suggestion: str | None = None
    details: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.label:
            raise ValueError("label must not be empty")

    @property
    def location(self) -> str:
        """Format as file:line:column."""
        return f"{self.file}:{self.span.start.line}:{self.span.start.column}"

    def sort_key(self) -> tuple[str, int, int]:
        """Deterministic ordering by file then position."""
        return (str(self.file), self.span.start.line, self.span.start.column)

    def __str__(self) -> str:
        """Format violation for display."""
        line = f"[{self.kind.name}] {self.message} at {self.location}"
        if self.suggestion:
            line = f"{line} ({self.suggestion})"
        return line
