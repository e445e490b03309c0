"""Declaration index construction exceptions.

All of these abort the analysis run: a partially built index is never
returned to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.base import ArchRulesError

if TYPE_CHECKING:
    from pathlib import Path


class ModuleResolutionError(ArchRulesError):
    """Declared sub-namespace has no backing source file.

    Attributes:
        path: Directory searched for the backing file
        module_name: Name of the declared sub-namespace
        candidates: Every file location that was tried
    """

    def __init__(
        self,
        path: Path,
        module_name: str,
        candidates: tuple[Path, ...] = (),
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must not be empty")

        self.path = path
        self.module_name = module_name
        self.candidates = candidates

        tried = ", ".join(str(c) for c in candidates) or "no candidates"
        super().__init__(f"No source file found for module '{module_name}' in {path} ({tried})")


class SourceParsingError(ArchRulesError):
    """Source file could not be turned into a parsed module.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class IndexInvariantError(ArchRulesError):
    """Internal invariant of the declaration index was violated.

    Raised e.g. when a source span is requested for the synthetic root
    namespace, which has none.

    Attributes:
        reason: Broken invariant
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Declaration index invariant violated: {reason}")
