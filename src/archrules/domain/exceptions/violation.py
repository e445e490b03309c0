"""Architecture violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.base import ArchRulesError

if TYPE_CHECKING:
    from archrules.domain.model.assertion_result import AssertionResult


class ArchitectureViolationError(ArchRulesError):
    """Architecture rules violated.

    Raised by assert_check() when a rule fails.

    Attributes:
        result: Failed assertion result
        violations: All found violations
    """

    def __init__(self, result: AssertionResult) -> None:
        if result.passed:
            raise ValueError("ArchitectureViolationError requires a failed result")

        self.result = result
        self.violations = result.violations

        super().__init__(str(result))
