"""Namespace rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.application.matches import ModuleMatches
from archrules.application.rules import assertions, conditions
from archrules.application.rules._engine import ArchRule
from archrules.domain.model.enums import DeclarationKind
from archrules.domain.model.path_pattern import PathPattern
from archrules.domain.predicates import module_predicates as predicates

if TYPE_CHECKING:
    from archrules.application.rules.assertions import Assertion
    from archrules.application.rules.conditions import Condition
    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.module_tree import ModuleTree
    from archrules.domain.model.module_use import ModuleUse
    from archrules.domain.model.violation import RuleViolation


class ModuleRule(ArchRule[ModuleMatches]):
    """Rule over every reachable namespace, the root included.

    AND narrows by plain intersection with the running matches; a matched
    namespace's descendants are not pulled in unless they match themselves.

    Visibility and name assertions report at the namespace declaration;
    they raise IndexInvariantError when the root namespace (which has no
    declaration) is a violator.
    """

    kind = DeclarationKind.MODULE
    plural = "modules"
    supported_conditions = (
        conditions.AreDeclaredPublic,
        conditions.AreDeclaredPrivate,
        conditions.HaveSimpleName,
        conditions.HaveSimpleNameStartingWith,
        conditions.HaveSimpleNameEndingWith,
        conditions.ResideInAModule,
        conditions.DoNotResideInAModule,
    )
    supported_assertions = (
        assertions.BePublic,
        assertions.BePrivate,
        assertions.HaveSimpleName,
        assertions.OnlyHaveDependenciesMatching,
    )

    def _universe(self) -> ModuleMatches:
        return self._index.flatten(self._filters)

    def _select(self, condition: Condition, candidates: ModuleMatches) -> ModuleMatches:
        match condition:
            case conditions.AreDeclaredPublic():
                return candidates.modules_that(predicates.is_public())
            case conditions.AreDeclaredPrivate():
                return candidates.modules_that(predicates.is_private())
            case conditions.HaveSimpleName(name=name):
                return candidates.modules_that(predicates.has_simple_name(name))
            case conditions.HaveSimpleNameStartingWith(prefix=prefix):
                return candidates.modules_that(predicates.name_starts_with(prefix))
            case conditions.HaveSimpleNameEndingWith(suffix=suffix):
                return candidates.modules_that(predicates.name_ends_with(suffix))
            case conditions.ResideInAModule(pattern=pattern):
                return candidates.modules_that(predicates.resides_in_module(pattern))
            case conditions.DoNotResideInAModule(pattern=pattern):
                return candidates.modules_that(predicates.not_resides_in_module(pattern))
            case _:
                raise self._unsupported(condition)

    def _check(self, assertion: Assertion, subject: ModuleMatches) -> list[RuleViolation]:
        factory = self._violations
        members = subject.sorted()
        match assertion:
            case assertions.BePublic():
                violations = []
                for module in members:
                    if not module.is_public:
                        file, span = module.require_declaration()
                        violations.append(
                            factory.be_public(module.name, file, span, module.visibility)
                        )
                return violations
            case assertions.BePrivate():
                violations = []
                for module in members:
                    if module.is_public:
                        file, span = module.require_declaration()
                        violations.append(
                            factory.be_private(module.name, file, span, module.visibility)
                        )
                return violations
            case assertions.HaveSimpleName(name=name):
                violations = []
                for module in members:
                    if module.name != name:
                        file, span = module.require_declaration()
                        violations.append(factory.name_match(module.name, name, file, span))
                return violations
            case assertions.OnlyHaveDependenciesMatching(pattern=pattern):
                return self._check_dependencies(pattern, members)
            case _:
                raise self._unsupported(assertion)

    def _check_dependencies(self, pattern: str, members: list[ModuleTree]) -> list[RuleViolation]:
        compiled = PathPattern(pattern)
        # a namespace and its descendant may both be matched; report each import once
        seen: set[tuple[ItemPath, ModuleUse]] = set()
        violations = []
        for module in members:
            deps = self._index.flatten_deps(self._filters, start=module)
            for dep, use in deps.edges():
                key = (dep.path, use)
                if key in seen or use.matching(compiled):
                    continue
                seen.add(key)
                violations.append(
                    self._violations.dependency_match(dep.path.name, use, pattern, dep.file)
                )
        return violations
