"""Import edge value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.model.item_path import SEPARATOR
from archrules.domain.model.path_pattern import PathPattern

if TYPE_CHECKING:
    from archrules.domain.model.location import CodeSpan

CRATE_KEYWORD = "crate"


@dataclass(frozen=True, slots=True)
class ModuleUse:
    """Path referenced by one import statement.

    The path is kept as text and never resolved to a declaration.

    Attributes:
        path: Imported path as written, e.g. "crate::rule::structs"
        span: Source span of the whole import statement
    """

    path: str
    span: CodeSpan

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")

    def matching(self, pattern: str | PathPattern) -> bool:
        """Match the import path against a module-path pattern."""
        if isinstance(pattern, str):
            pattern = PathPattern(pattern)
        return pattern.matches_module_path(self.path)

    def canonical(self, root_name: str) -> str:
        """Import path with a leading `crate` replaced by root_name."""
        if self.path == CRATE_KEYWORD or self.path.startswith(CRATE_KEYWORD + SEPARATOR):
            return root_name + self.path[len(CRATE_KEYWORD) :]
        return self.path

    def starts_with(self, prefix: str, root_name: str) -> bool:
        """Check if the canonical import path names prefix or something beneath it.

        Args:
            prefix: Namespace prefix, e.g. "app::rule"
            root_name: Name substituted for a leading `crate`

        Returns:
            True if the canonical path equals prefix or continues it
            past a "::" boundary
        """
        path = self.canonical(root_name)
        return path == prefix or path.startswith(prefix + SEPARATOR)

    def __str__(self) -> str:
        """Return import path."""
        return self.path
