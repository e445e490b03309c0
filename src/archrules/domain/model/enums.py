"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto


class Visibility(Enum):
    """Declared visibility of a namespace, type or field."""

    PUBLIC = auto()  # pub
    CRATE = auto()  # pub(crate)
    RESTRICTED = auto()  # pub(super), pub(in path)
    INHERITED = auto()  # no modifier

    @property
    def is_public(self) -> bool:
        """Only PUBLIC counts as public; everything else is private."""
        return self is Visibility.PUBLIC

    @classmethod
    def parse(cls, value: str) -> Visibility:
        """Parse visibility from its lowercase name.

        Args:
            value: One of "public", "crate", "restricted", "inherited"

        Returns:
            Matching Visibility

        Raises:
            ValueError: If value is not a known visibility
        """
        try:
            return cls[value.upper()]
        except KeyError:
            known = ", ".join(v.name.lower() for v in cls)
            raise ValueError(f"unknown visibility '{value}', expected one of: {known}") from None


class DeclarationKind(Enum):
    """Kind of declaration a rule is written against."""

    MODULE = auto()
    STRUCT = auto()
    ENUM = auto()

    @property
    def title(self) -> str:
        """Capitalized singular name used in messages."""
        return self.name.capitalize()


class ViolationKind(Enum):
    """What a violation report is about."""

    BE_PUBLIC = auto()
    BE_PRIVATE = auto()
    DERIVE = auto()
    IMPLEMENT = auto()
    IMPLEMENT_OR_DERIVE = auto()
    NAME_MATCH = auto()
    ONLY_PRIVATE_FIELDS = auto()
    ONLY_PUBLIC_FIELDS = auto()
    DEPENDENCY_MATCH = auto()
    DEPENDENCY_ACCESS = auto()
