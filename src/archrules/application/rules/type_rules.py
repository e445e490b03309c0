"""Struct and enum rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from archrules.application.matches import EnumMatches, StructMatches
from archrules.application.rules import assertions, conditions
from archrules.application.rules._engine import ArchRule
from archrules.domain.model.enums import DeclarationKind
from archrules.domain.predicates import declaration_predicates as predicates
from archrules.domain.predicates.impl_predicates import implements_trait

if TYPE_CHECKING:
    from archrules.application.rules.assertions import Assertion
    from archrules.application.rules.conditions import Condition
    from archrules.domain.model.violation import RuleViolation


class TypeDeclarationRule[M: (StructMatches, EnumMatches)](ArchRule[M]):
    """Vocabulary shared by structs and enums."""

    supported_conditions: ClassVar[tuple[type, ...]] = (
        conditions.AreDeclaredPublic,
        conditions.AreDeclaredPrivate,
        conditions.HaveSimpleName,
        conditions.ResideInAModule,
        conditions.Derive,
        conditions.Implement,
    )
    supported_assertions: ClassVar[tuple[type, ...]] = (
        assertions.BePublic,
        assertions.BePrivate,
        assertions.HaveSimpleName,
        assertions.Implement,
        assertions.Derive,
        assertions.ImplementOrDerive,
    )

    def _implementors(self, trait: str) -> frozenset[str]:
        """Simple names of types with an impl block for trait."""
        return self._index.flatten_impls(self._filters).impl_that(implements_trait(trait)).types()

    def _select(self, condition: Condition, candidates: M) -> M:
        match condition:
            case conditions.AreDeclaredPublic():
                return candidates.that(predicates.is_public())
            case conditions.AreDeclaredPrivate():
                return candidates.that(predicates.is_private())
            case conditions.HaveSimpleName(name=name):
                return candidates.that(predicates.has_simple_name(name))
            case conditions.HaveNameMatching(pattern=pattern):
                return candidates.that(predicates.has_name_matching(pattern))
            case conditions.ResideInAModule(pattern=pattern):
                return candidates.that(predicates.resides_in_module(pattern))
            case conditions.Derive(trait=trait):
                return candidates.that(predicates.derives(trait))
            case conditions.Implement(trait=trait):
                return candidates.that(predicates.named_in(self._implementors(trait)))
            case _:
                raise self._unsupported(condition)

    def _check(self, assertion: Assertion, subject: M) -> list[RuleViolation]:
        factory = self._violations
        members = subject.sorted()
        match assertion:
            case assertions.BePublic():
                return [
                    factory.be_public(d.name, d.file, d.span, d.visibility)
                    for d in members
                    if not d.is_public
                ]
            case assertions.BePrivate():
                return [
                    factory.be_private(d.name, d.file, d.span, d.visibility)
                    for d in members
                    if d.is_public
                ]
            case assertions.HaveSimpleName(name=name):
                return [
                    factory.name_match(d.name, name, d.file, d.span)
                    for d in members
                    if d.name != name
                ]
            case assertions.Derive(trait=trait):
                return [
                    factory.derive(d.name, trait, d.file, d.span)
                    for d in members
                    if not d.derives_trait(trait)
                ]
            case assertions.Implement(trait=trait):
                implementors = self._implementors(trait)
                return [
                    factory.implement(d.name, trait, d.file, d.span)
                    for d in members
                    if d.name not in implementors
                ]
            case assertions.ImplementOrDerive(trait=trait):
                # violators = (not derived) intersected with (not implemented)
                implementors = self._implementors(trait)
                return [
                    factory.implement_or_derive(d.name, trait, d.file, d.span)
                    for d in members
                    if not d.derives_trait(trait) and d.name not in implementors
                ]
            case _:
                return self._check_specific(assertion, members)

    def _check_specific(self, assertion: Assertion, members: list) -> list[RuleViolation]:
        raise self._unsupported(assertion)


class StructRule(TypeDeclarationRule[StructMatches]):
    """Rule over every struct in the index.

    Example:
        rule = StructRule(
            index,
            [conditions.HaveNameMatching("*Matches")],
            [assertions.Implement("Subject")],
        )
        result = rule.evaluate()
    """

    kind = DeclarationKind.STRUCT
    plural = "structs"
    supported_conditions = (*TypeDeclarationRule.supported_conditions, conditions.HaveNameMatching)
    supported_assertions = (
        *TypeDeclarationRule.supported_assertions,
        assertions.OnlyHavePrivateFields,
        assertions.OnlyHavePublicFields,
    )

    def _universe(self) -> StructMatches:
        return self._index.flatten_structs(self._filters)

    def _check_specific(self, assertion: Assertion, members: list) -> list[RuleViolation]:
        factory = self._violations
        match assertion:
            case assertions.OnlyHavePrivateFields():
                return [
                    factory.public_field(s.name, field, s.file)
                    for s in members
                    for field in s.public_fields()
                ]
            case assertions.OnlyHavePublicFields():
                return [
                    factory.private_field(s.name, field, s.file)
                    for s in members
                    for field in s.private_fields()
                ]
            case _:
                raise self._unsupported(assertion)


class EnumRule(TypeDeclarationRule[EnumMatches]):
    """Rule over every enum in the index."""

    kind = DeclarationKind.ENUM
    plural = "enums"

    def _universe(self) -> EnumMatches:
        return self._index.flatten_enums(self._filters)
