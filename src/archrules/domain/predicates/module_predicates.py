"""Namespace predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.model.path_pattern import PathPattern

if TYPE_CHECKING:
    from archrules.domain.model.module_tree import ModuleTree
    from archrules.domain.predicates.base import ModulePredicate


def is_public() -> ModulePredicate:
    """Create predicate: namespace declared pub."""

    def predicate(module: ModuleTree) -> bool:
        return module.is_public

    return predicate


def is_private() -> ModulePredicate:
    """Create predicate: namespace not declared pub."""

    def predicate(module: ModuleTree) -> bool:
        return not module.is_public

    return predicate


def has_simple_name(name: str) -> ModulePredicate:
    """Create predicate: simple name equals name exactly."""

    def predicate(module: ModuleTree) -> bool:
        return module.name == name

    return predicate


def name_starts_with(prefix: str) -> ModulePredicate:
    """Create predicate: simple name starts with prefix."""

    def predicate(module: ModuleTree) -> bool:
        return module.name.startswith(prefix)

    return predicate


def name_ends_with(suffix: str) -> ModulePredicate:
    """Create predicate: simple name ends with suffix."""

    def predicate(module: ModuleTree) -> bool:
        return module.name.endswith(suffix)

    return predicate


def resides_in_module(pattern: str) -> ModulePredicate:
    """Create predicate: full namespace path matches pattern.

    Args:
        pattern: Wildcard pattern, e.g. "app::rule::*"

    Returns:
        Predicate function
    """
    compiled = PathPattern(pattern)

    def predicate(module: ModuleTree) -> bool:
        return module.path.match_module_path(compiled)

    return predicate


def not_resides_in_module(pattern: str) -> ModulePredicate:
    """Create predicate: full namespace path does not match pattern."""
    inner = resides_in_module(pattern)

    def predicate(module: ModuleTree) -> bool:
        return not inner(module)

    return predicate
