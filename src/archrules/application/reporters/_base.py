"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.assertion_result import AssertionResult


class BaseReporter(ABC):
    """Base class for rule result reporters.

    archrules provides PlainTextReporter and ConsoleReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: AssertionResult) -> str:
                return f"Violations: {result.violation_count}"
    """

    @abstractmethod
    def report(self, result: AssertionResult) -> str | None:
        """Report one rule result.

        Implementation decides output format and destination.

        Args:
            result: Evaluated rule or layer check
        """
