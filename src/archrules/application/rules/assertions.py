"""Assertion vocabulary.

Each assertion is universally quantified over the matched set: it holds
iff no member violates it.
"""

from __future__ import annotations

from dataclasses import dataclass

from archrules.application.rules.conjunction import Conjunction


def _require(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"{what} must not be empty")


@dataclass(frozen=True, slots=True)
class BePublic:
    def describe(self) -> str:
        return "be public"


@dataclass(frozen=True, slots=True)
class BePrivate:
    def describe(self) -> str:
        return "be private"


@dataclass(frozen=True, slots=True)
class HaveSimpleName:
    name: str

    def __post_init__(self) -> None:
        _require(self.name, "name")

    def describe(self) -> str:
        return f"have simple name '{self.name}'"


@dataclass(frozen=True, slots=True)
class Implement:
    trait: str

    def __post_init__(self) -> None:
        _require(self.trait, "trait")

    def describe(self) -> str:
        return f"implement '{self.trait}'"


@dataclass(frozen=True, slots=True)
class Derive:
    trait: str

    def __post_init__(self) -> None:
        _require(self.trait, "trait")

    def describe(self) -> str:
        return f"derive '{self.trait}'"


@dataclass(frozen=True, slots=True)
class ImplementOrDerive:
    """Violated only by members that neither derive nor implement trait."""

    trait: str

    def __post_init__(self) -> None:
        _require(self.trait, "trait")

    def describe(self) -> str:
        return f"implement or derive '{self.trait}'"


@dataclass(frozen=True, slots=True)
class OnlyHavePrivateFields:
    def describe(self) -> str:
        return "only have private fields"


@dataclass(frozen=True, slots=True)
class OnlyHavePublicFields:
    def describe(self) -> str:
        return "only have public fields"


@dataclass(frozen=True, slots=True)
class OnlyHaveDependenciesMatching:
    """Every import edge of the namespace and its descendants matches pattern."""

    pattern: str

    def __post_init__(self) -> None:
        _require(self.pattern, "pattern")

    def describe(self) -> str:
        return f"only have dependencies matching pattern '{self.pattern}'"


type Assertion = (
    BePublic
    | BePrivate
    | HaveSimpleName
    | Implement
    | Derive
    | ImplementOrDerive
    | OnlyHavePrivateFields
    | OnlyHavePublicFields
    | OnlyHaveDependenciesMatching
)
type AssertionToken = Assertion | Conjunction
