"""Source excerpts for point-in-file reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.location import CodeSpan
    from archrules.domain.model.violation import RuleViolation


def code_sample_region(source: str, span: CodeSpan) -> str:
    """Lines covered by span (1-based, inclusive), joined by newlines.

    Args:
        source: Whole file contents
        span: Span to cut out

    Returns:
        Excerpt, empty if the span lies beyond the end of the file
    """
    lines = source.splitlines()
    return "\n".join(lines[span.start.line - 1 : span.end.line])


def label_span(sample: str, needle: str | None, fallback: CodeSpan) -> tuple[int, int]:
    """Offset and length of the label inside a sample.

    The first occurrence of needle wins. Without one, the recorded columns
    of fallback are used, measured on the sample's first line.

    Args:
        sample: Excerpt returned by code_sample_region
        needle: Text to underline (declaration or field name)
        fallback: Recorded span

    Returns:
        (offset, length) into sample
    """
    if needle:
        start = sample.find(needle)
        if start >= 0:
            return start, len(needle)
    if fallback.start.line == fallback.end.line:
        length = fallback.end.column - fallback.start.column
    else:
        first_line = sample.split("\n", 1)[0]
        length = len(first_line) - fallback.start.column
    return fallback.start.column, max(length, 0)


def violation_sample(
    violation: RuleViolation, project_root: Path
) -> tuple[str, tuple[int, int]] | None:
    """Read the excerpt and label position for one violation.

    Args:
        violation: Violation to illustrate
        project_root: Base the violation's relative file is resolved against

    Returns:
        (sample, (offset, length)) or None when the file cannot be read
    """
    path = violation.file if violation.file.is_absolute() else project_root / violation.file
    try:
        source = path.read_text(encoding="utf-8")
    except OSError:
        return None
    sample = code_sample_region(source, violation.span)
    return sample, label_span(sample, _needle(violation), violation.span)


def _needle(violation: RuleViolation) -> str | None:
    details = violation.details
    if "dependency" in details:
        return details["dependency"]
    if "field" in details:
        # positional fields have no name in the source
        field = details["field"]
        return None if field.isdigit() else field
    return violation.subject
