"""Rule evaluation result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.violation import RuleViolation


@dataclass(frozen=True, slots=True)
class AssertionResult:
    """Outcome of evaluating one rule.

    Attributes:
        expected: Natural-language description built during evaluation
        violations: Violations responsible for the failure (empty if passed)
        passed: True if the rule holds
    """

    expected: str
    violations: tuple[RuleViolation, ...]
    passed: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.expected:
            raise ValueError("expected must not be empty")
        if self.passed and self.violations:
            raise ValueError("passed result must not carry violations")

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    def __bool__(self) -> bool:
        """Truthy iff the rule passed."""
        return self.passed

    def __str__(self) -> str:
        """Format as expected-vs-found summary plus one line per violation."""
        lines = [f"Expected {self.expected} but found {len(self.violations)} violations"]
        lines.extend(str(v) for v in self.violations)
        return "\n".join(lines)
