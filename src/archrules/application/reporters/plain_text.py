"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from archrules.application.reporters._base import BaseReporter
from archrules.application.reporters.snippet import violation_sample

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.assertion_result import AssertionResult
    from archrules.domain.model.violation import RuleViolation


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    When project_root is given, each violation is followed by the source
    lines it points at.
    """

    def __init__(self, output: TextIO | None = None, project_root: Path | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            project_root: Base for reading source excerpts (default: no excerpts)
        """
        self._output = output if output is not None else sys.stdout
        self._project_root = project_root

    def report(self, result: AssertionResult) -> None:
        """Report rule result as plain text.

        Args:
            result: Evaluated rule or layer check
        """
        self._write("=" * 70)
        self._write(f"Expected {result.expected}")
        self._write("=" * 70)

        for i, violation in enumerate(result.violations, start=1):
            self._report_violation(i, violation)

        self._write()
        status = "PASSED" if result.passed else f"FAILED ({result.violation_count} violations)"
        self._write(f"Result: {status}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_violation(self, number: int, violation: RuleViolation) -> None:
        self._write()
        self._write(f"{number}. [{violation.kind.name}] {violation.message}")
        self._write(f"   at {violation.location}")
        if violation.suggestion:
            self._write(f"   help: {violation.suggestion}")

        if self._project_root is None:
            return
        excerpt = violation_sample(violation, self._project_root)
        if excerpt is None:
            return
        sample, (offset, length) = excerpt
        line_start = sample.rfind("\n", 0, offset) + 1
        line_end = sample.find("\n", offset)
        line = sample[line_start : line_end if line_end >= 0 else len(sample)]
        self._write(f"   | {line}")
        self._write(f"   | {' ' * (offset - line_start)}{'^' * max(length, 1)} {violation.label}")
