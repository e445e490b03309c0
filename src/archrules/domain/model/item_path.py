"""Qualified namespace path value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archrules.domain.model.path_pattern import PathPattern

SEPARATOR = "::"


@dataclass(frozen=True, slots=True, order=True)
class ItemPath:
    """Separator-joined path of a namespace or declaration.

    Example: "app::domain::model::Order".
    Empty path is allowed (used for impl blocks on non-path types).

    Attributes:
        value: Full path string
    """

    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.value is None:
            raise TypeError("value must not be None")
        if self.value.endswith(SEPARATOR) or self.value.startswith(SEPARATOR):
            raise ValueError(f"path must not start or end with '{SEPARATOR}': {self.value!r}")

    @classmethod
    def empty(cls) -> ItemPath:
        """Path with no segments."""
        return cls("")

    @property
    def is_empty(self) -> bool:
        """True if path has no segments."""
        return not self.value

    def join(self, segment: str) -> ItemPath:
        """Append one segment.

        Args:
            segment: Segment to append (must be non-empty)

        Returns:
            New path; joining onto an empty path yields the segment alone

        Raises:
            ValueError: If segment is empty
        """
        if not segment:
            raise ValueError("segment must not be empty")
        if self.is_empty:
            return ItemPath(segment)
        return ItemPath(f"{self.value}{SEPARATOR}{segment}")

    @property
    def name(self) -> str:
        """Last segment (the simple name)."""
        return self.value.rsplit(SEPARATOR, 1)[-1]

    @property
    def parent(self) -> ItemPath | None:
        """Path without the last segment, None for single-segment paths."""
        if SEPARATOR not in self.value:
            return None
        return ItemPath(self.value.rsplit(SEPARATOR, 1)[0])

    @property
    def segments(self) -> tuple[str, ...]:
        """All segments in order."""
        if self.is_empty:
            return ()
        return tuple(self.value.split(SEPARATOR))

    def reside_in(self, prefix: str) -> bool:
        """Check if path is prefix or lies beneath it.

        Matching stops at segment boundaries: "app::rules" does not
        reside in "app::rule".
        """
        return self.value == prefix or self.value.startswith(prefix + SEPARATOR)

    def reside_in_any(self, prefixes: Iterable[str]) -> bool:
        """Check if path starts with any of the prefixes."""
        return any(self.reside_in(p) for p in prefixes)

    def match_module_path(self, pattern: PathPattern) -> bool:
        """Match whole path against pattern."""
        return pattern.matches_module_path(self.value)

    def match_type_path(self, pattern: PathPattern) -> bool:
        """Match the declaring namespace of this type path against pattern."""
        return pattern.matches_type_path(self.value)

    def contains(self, fragment: str) -> bool:
        """Substring check on the full path."""
        return fragment in self.value

    def __str__(self) -> str:
        """Return raw path string."""
        return self.value
