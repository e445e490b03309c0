"""Wildcard matching over namespace paths.

Syntax:
    *    any run of characters, separators included
    ?    exactly one character

Everything else is literal; matching is case-sensitive and covers the
whole subject. A trailing "::" on the pattern is ignored, so "app::rule::"
and "app::rule" are the same pattern.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from archrules.domain.model.item_path import SEPARATOR


def _compile(pattern: str) -> re.Pattern[str]:
    escaped = re.escape(pattern)
    escaped = escaped.replace(r"\*", ".*")
    escaped = escaped.replace(r"\?", ".")
    return re.compile(escaped, re.DOTALL)


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Compiled wildcard pattern.

    Two matching modes exist:
        module path: the pattern is matched against the full path
        type path: the subject is split at its last separator and only the
            declaring namespace is matched, never the type's simple name

    Attributes:
        pattern: Pattern as written by the user
    """

    pattern: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and compile. FAIL-FIRST."""
        if self.pattern is None:
            raise TypeError("pattern must not be None")
        normalized = self.pattern.removesuffix(SEPARATOR)
        object.__setattr__(self, "_regex", _compile(normalized))

    def matches(self, subject: str) -> bool:
        """Raw wildcard match of the whole subject string."""
        if subject is None:
            raise TypeError("subject must not be None")
        return self._regex.fullmatch(subject) is not None

    def matches_module_path(self, path: str) -> bool:
        """Match a namespace path directly.

        Args:
            path: Full namespace path, e.g. "app::rule::structs"

        Returns:
            True if the whole path matches
        """
        return self.matches(path)

    def matches_type_path(self, path: str) -> bool:
        """Match the declaring namespace of a qualified type path.

        "app::model::Order" is matched as "app::model"; a path without
        a separator has no namespace and never matches.

        Args:
            path: Qualified type path

        Returns:
            True if the namespace portion matches
        """
        if SEPARATOR not in path:
            return False
        namespace, _name = path.rsplit(SEPARATOR, 1)
        return self.matches(namespace)

    def __str__(self) -> str:
        """Return pattern as written."""
        return self.pattern
