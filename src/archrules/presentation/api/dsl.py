"""Fluent API (DSL) for architecture rules.

Entry point for fluent declaration queries and assertions. Queries and
assertion builders are immutable: every call returns a new builder, so a
partially built chain can be shared and extended safely.

Example:
    arch = ArchRules(index, Filters.cfg_test())
    (
        arch.structs()
        .have_simple_name("Foo")
        .and_()
        .are_declared_private()
        .should()
        .derive("Debug")
        .assert_check()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Self, cast

from archrules.application.rules import assertions as a
from archrules.application.rules import conditions as c
from archrules.application.rules.conjunction import Conjunction
from archrules.application.rules.module_rule import ModuleRule
from archrules.application.rules.type_rules import EnumRule, StructRule
from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.filters import Filters
from archrules.presentation.api.layers import ArchitectureQuery

if TYPE_CHECKING:
    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.application.rules import ArchRule
    from archrules.application.rules.assertions import Assertion, AssertionToken
    from archrules.application.rules.conditions import Condition, ConditionToken
    from archrules.domain.model.assertion_result import AssertionResult


class ArchRules:
    """Entry point for architecture rules.

    Attributes:
        _index: Declaration index every rule is evaluated against
        _filters: Subtree exclusion filters shared by all rules
    """

    def __init__(self, index: DeclarationIndex, filters: Filters | None = None) -> None:
        """Initialize entry point.

        Args:
            index: Declaration index to analyze
            filters: Subtree exclusion filters (default: exclude nothing)

        Raises:
            TypeError: If index is None
        """
        if index is None:
            raise TypeError("index must not be None")
        self._index = index
        self._filters = filters if filters is not None else Filters.none()

    @property
    def index(self) -> DeclarationIndex:
        """Declaration index."""
        return self._index

    @property
    def filters(self) -> Filters:
        """Filters applied by every rule started here."""
        return self._filters

    def structs(self) -> StructQuery:
        """Start struct query.

        Calling should() right away yields a rule over all structs.

        Returns:
            StructQuery for chaining conditions
        """
        return StructQuery(_index=self._index, _filters=self._filters)

    def enums(self) -> EnumQuery:
        """Start enum query.

        Returns:
            EnumQuery for chaining conditions
        """
        return EnumQuery(_index=self._index, _filters=self._filters)

    def modules(self) -> ModuleQuery:
        """Start namespace query.

        Returns:
            ModuleQuery for chaining conditions
        """
        return ModuleQuery(_index=self._index, _filters=self._filters)

    def layered_architecture(self) -> ArchitectureQuery:
        """Start layered architecture definition.

        Returns:
            ArchitectureQuery for declaring layers and access rules
        """
        return ArchitectureQuery(self._index, self._filters)


def _rule_name(rule: type[ArchRule]) -> str:
    return f"{rule.plural} rule"


@dataclass(frozen=True, slots=True)
class _Assertion:
    """Assertion phase shared by every declaration kind.

    Each collect() builds and evaluates a fresh rule, so one builder can
    be checked any number of times.
    """

    _index: DeclarationIndex
    _filters: Filters
    _conditions: tuple[ConditionToken, ...]
    _assertions: tuple[AssertionToken, ...] = ()

    _rule: ClassVar[type[ArchRule]]

    def _with_assertion(self, kind: type[Assertion], *args: str) -> Self:
        """Return new builder with assertion kind(*args) appended.

        Raises:
            RuleValidationError: If the previous assertion has no
                and_should()/or_should() after it, or an argument is empty
        """
        if self._assertions and not isinstance(self._assertions[-1], Conjunction):
            raise RuleValidationError(
                _rule_name(self._rule),
                f"call and_should() or or_should() before {kind.__name__}",
            )
        try:
            assertion = kind(*args)
        except ValueError as e:
            raise RuleValidationError(_rule_name(self._rule), str(e)) from e
        return replace(self, _assertions=(*self._assertions, assertion))

    def _with_conjunction(self, conjunction: Conjunction) -> Self:
        if not self._assertions or isinstance(self._assertions[-1], Conjunction):
            raise RuleValidationError(
                _rule_name(self._rule),
                f"{conjunction.name.lower()}_should() must follow an assertion",
            )
        return replace(self, _assertions=(*self._assertions, conjunction))

    def and_should(self) -> Self:
        """Both sides must hold."""
        return self._with_conjunction(Conjunction.AND)

    def or_should(self) -> Self:
        """Fold the outcomes with `or`; violations of either side still fail the rule."""
        return self._with_conjunction(Conjunction.OR)

    def be_public(self) -> Self:
        """Assert every matched declaration is pub."""
        return self._with_assertion(a.BePublic)

    def be_private(self) -> Self:
        """Assert no matched declaration is pub."""
        return self._with_assertion(a.BePrivate)

    def have_simple_name(self, name: str) -> Self:
        """Assert every matched declaration is named name."""
        return self._with_assertion(a.HaveSimpleName, name)

    def build(self) -> ArchRule:
        """Create the single-use rule.

        Returns:
            Unevaluated rule

        Raises:
            RuleValidationError: If no assertion was added or the chain ends
                with and_should()/or_should()
        """
        return self._rule(
            self._index,
            self._conditions,
            self._assertions,
            self._filters,
            name=_rule_name(self._rule),
        )

    def collect(self) -> AssertionResult:
        """Evaluate the rule.

        Returns:
            Result with expected description, verdict and violations
        """
        return self.build().evaluate()

    def assert_check(self) -> None:
        """Evaluate the rule and raise on failure.

        Raises:
            ArchitectureViolationError: If the rule does not pass
        """
        result = self.collect()
        if not result.passed:
            raise ArchitectureViolationError(result)

    def is_valid(self) -> bool:
        """Check if the rule passes.

        Returns:
            True if no violations, False otherwise
        """
        return self.collect().passed


@dataclass(frozen=True, slots=True)
class _TypeAssertion(_Assertion):
    """Assertions shared by structs and enums."""

    def implement(self, trait: str) -> Self:
        """Assert every matched type has an impl block for trait."""
        return self._with_assertion(a.Implement, trait)

    def derive(self, trait: str) -> Self:
        """Assert every matched type derives trait."""
        return self._with_assertion(a.Derive, trait)

    def implement_or_derive(self, trait: str) -> Self:
        """Assert every matched type derives or implements trait.

        A type violates only when it does neither.
        """
        return self._with_assertion(a.ImplementOrDerive, trait)


@dataclass(frozen=True, slots=True)
class StructAssertion(_TypeAssertion):
    """Immutable assertion builder for structs."""

    _rule = StructRule

    def only_have_private_fields(self) -> StructAssertion:
        """Assert no matched struct has a pub field (one violation per field)."""
        return self._with_assertion(a.OnlyHavePrivateFields)

    def only_have_public_fields(self) -> StructAssertion:
        """Assert every field of every matched struct is pub."""
        return self._with_assertion(a.OnlyHavePublicFields)


@dataclass(frozen=True, slots=True)
class EnumAssertion(_TypeAssertion):
    """Immutable assertion builder for enums."""

    _rule = EnumRule


@dataclass(frozen=True, slots=True)
class ModuleAssertion(_Assertion):
    """Immutable assertion builder for namespaces."""

    _rule = ModuleRule

    def only_have_dependencies_matching(self, pattern: str) -> ModuleAssertion:
        """Assert every import under the matched namespaces matches pattern.

        Descendants are scanned too, unless a filter prunes them.

        Args:
            pattern: Wildcard pattern matched against the import text

        Returns:
            Assertion with added check
        """
        return self._with_assertion(a.OnlyHaveDependenciesMatching, pattern)


@dataclass(frozen=True, slots=True)
class _Query[A: _Assertion]:
    """Condition phase shared by every declaration kind."""

    _index: DeclarationIndex
    _filters: Filters
    _conditions: tuple[ConditionToken, ...] = ()

    _assertion: ClassVar[type[_Assertion]]

    def _with_condition(self, kind: type[Condition], *args: str) -> Self:
        """Return new query with condition kind(*args) appended.

        Raises:
            RuleValidationError: If the previous condition has no and_()/or_()
                after it, or an argument is empty
        """
        if self._conditions and not isinstance(self._conditions[-1], Conjunction):
            raise RuleValidationError(
                _rule_name(self._assertion._rule),
                f"call and_() or or_() before {kind.__name__}",
            )
        try:
            condition = kind(*args)
        except ValueError as e:
            raise RuleValidationError(_rule_name(self._assertion._rule), str(e)) from e
        return replace(self, _conditions=(*self._conditions, condition))

    def _with_conjunction(self, conjunction: Conjunction) -> Self:
        if not self._conditions or isinstance(self._conditions[-1], Conjunction):
            raise RuleValidationError(
                _rule_name(self._assertion._rule),
                f"{conjunction.name.lower()}_() must follow a condition",
            )
        return replace(self, _conditions=(*self._conditions, conjunction))

    def and_(self) -> Self:
        """Narrow: the next condition filters what is matched so far."""
        return self._with_conjunction(Conjunction.AND)

    def or_(self) -> Self:
        """Broaden: the next condition selects from the whole universe."""
        return self._with_conjunction(Conjunction.OR)

    def are_declared_public(self) -> Self:
        """Select pub declarations."""
        return self._with_condition(c.AreDeclaredPublic)

    def are_declared_private(self) -> Self:
        """Select non-pub declarations."""
        return self._with_condition(c.AreDeclaredPrivate)

    def have_simple_name(self, name: str) -> Self:
        """Select declarations whose simple name equals name."""
        return self._with_condition(c.HaveSimpleName, name)

    def reside_in_a_module(self, pattern: str) -> Self:
        """Select declarations whose namespace matches a wildcard pattern.

        Args:
            pattern: Wildcard pattern, e.g. "app::rule::*"

        Returns:
            Filtered query
        """
        return self._with_condition(c.ResideInAModule, pattern)

    def should(self) -> A:
        """Transition to assertion mode.

        Returns:
            Assertion builder carrying the conditions

        Raises:
            RuleValidationError: If the conditions end with and_()/or_()
        """
        if self._conditions and isinstance(self._conditions[-1], Conjunction):
            raise RuleValidationError(
                _rule_name(self._assertion._rule),
                "should() cannot follow a dangling conjunction",
            )
        builder = self._assertion(
            _index=self._index,
            _filters=self._filters,
            _conditions=self._conditions,
        )
        return cast("A", builder)


@dataclass(frozen=True, slots=True)
class _TypeQuery[A: _TypeAssertion](_Query[A]):
    """Conditions shared by structs and enums."""

    def derive(self, trait: str) -> Self:
        """Select types whose derive list contains trait."""
        return self._with_condition(c.Derive, trait)

    def implement(self, trait: str) -> Self:
        """Select types with an impl block for trait.

        Resolution is by self-type simple name and a substring match on
        the trait path; generics and blanket impls are not resolved.
        """
        return self._with_condition(c.Implement, trait)


@dataclass(frozen=True, slots=True)
class StructQuery(_TypeQuery[StructAssertion]):
    """Immutable query builder for structs."""

    _assertion = StructAssertion

    def have_name_matching(self, pattern: str) -> StructQuery:
        """Select structs whose simple name matches a wildcard pattern."""
        return self._with_condition(c.HaveNameMatching, pattern)


@dataclass(frozen=True, slots=True)
class EnumQuery(_TypeQuery[EnumAssertion]):
    """Immutable query builder for enums."""

    _assertion = EnumAssertion


@dataclass(frozen=True, slots=True)
class ModuleQuery(_Query[ModuleAssertion]):
    """Immutable query builder for namespaces (the root included)."""

    _assertion = ModuleAssertion

    def have_simple_name_starting_with(self, prefix: str) -> ModuleQuery:
        """Select namespaces whose simple name starts with prefix."""
        return self._with_condition(c.HaveSimpleNameStartingWith, prefix)

    def have_simple_name_ending_with(self, suffix: str) -> ModuleQuery:
        """Select namespaces whose simple name ends with suffix."""
        return self._with_condition(c.HaveSimpleNameEndingWith, suffix)

    def do_not_reside_in_a_module(self, pattern: str) -> ModuleQuery:
        """Select namespaces whose path does not match a wildcard pattern."""
        return self._with_condition(c.DoNotResideInAModule, pattern)
