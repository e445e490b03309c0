"""Conjunction token shared by conditions and assertions."""

from enum import Enum


class Conjunction(Enum):
    """How the next term combines with what came before.

    OR broadens: conditions are evaluated against the full universe and
    unioned; assertion outcomes are combined with `or`.
    AND narrows: conditions are evaluated against the running matches and
    replace them; assertion outcomes are combined with `and`.
    """

    AND = " and "
    OR = " or "

    @property
    def connective(self) -> str:
        """Text appended to the expected description."""
        return self.value
