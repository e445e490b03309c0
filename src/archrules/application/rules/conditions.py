"""Condition vocabulary.

Each condition narrows the universe of declarations. The set is closed:
every rule engine matches over these classes exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass

from archrules.application.rules.conjunction import Conjunction


def _require(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"{what} must not be empty")


@dataclass(frozen=True, slots=True)
class AreDeclaredPublic:
    """Declared pub."""

    def describe(self) -> str:
        return "are declared public"


@dataclass(frozen=True, slots=True)
class AreDeclaredPrivate:
    """Not declared pub."""

    def describe(self) -> str:
        return "are declared private"


@dataclass(frozen=True, slots=True)
class HaveSimpleName:
    """Simple name equals name."""

    name: str

    def __post_init__(self) -> None:
        _require(self.name, "name")

    def describe(self) -> str:
        return f"have simple name '{self.name}'"


@dataclass(frozen=True, slots=True)
class HaveNameMatching:
    """Simple name matches a wildcard pattern."""

    pattern: str

    def __post_init__(self) -> None:
        _require(self.pattern, "pattern")

    def describe(self) -> str:
        return f"have name matching '{self.pattern}'"


@dataclass(frozen=True, slots=True)
class HaveSimpleNameStartingWith:
    """Simple name starts with prefix."""

    prefix: str

    def __post_init__(self) -> None:
        _require(self.prefix, "prefix")

    def describe(self) -> str:
        return f"have simple name starting with '{self.prefix}'"


@dataclass(frozen=True, slots=True)
class HaveSimpleNameEndingWith:
    """Simple name ends with suffix."""

    suffix: str

    def __post_init__(self) -> None:
        _require(self.suffix, "suffix")

    def describe(self) -> str:
        return f"have simple name ending with '{self.suffix}'"


@dataclass(frozen=True, slots=True)
class ResideInAModule:
    """Declaring namespace (or, for namespaces, the path) matches pattern."""

    pattern: str

    def __post_init__(self) -> None:
        _require(self.pattern, "pattern")

    def describe(self) -> str:
        return f"resides in a modules that match '{self.pattern}'"


@dataclass(frozen=True, slots=True)
class DoNotResideInAModule:
    """Namespace path does not match pattern."""

    pattern: str

    def __post_init__(self) -> None:
        _require(self.pattern, "pattern")

    def describe(self) -> str:
        return f"not resides in a modules that match '{self.pattern}'"


@dataclass(frozen=True, slots=True)
class Derive:
    """Derive list contains trait."""

    trait: str

    def __post_init__(self) -> None:
        _require(self.trait, "trait")

    def describe(self) -> str:
        return f"derive {self.trait}"


@dataclass(frozen=True, slots=True)
class Implement:
    """Some impl block implements trait for the type."""

    trait: str

    def __post_init__(self) -> None:
        _require(self.trait, "trait")

    def describe(self) -> str:
        return f"implement {self.trait}"


type Condition = (
    AreDeclaredPublic
    | AreDeclaredPrivate
    | HaveSimpleName
    | HaveNameMatching
    | HaveSimpleNameStartingWith
    | HaveSimpleNameEndingWith
    | ResideInAModule
    | DoNotResideInAModule
    | Derive
    | Implement
)
type ConditionToken = Condition | Conjunction
