"""Struct and enum predicates.

Structs and enums share name, path, visibility and derive list, so one
set of predicates serves both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from archrules.domain.model.path_pattern import PathPattern

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from archrules.domain.model.item_path import ItemPath


class TypeDeclaration(Protocol):
    """Shape shared by Struct and Enum."""

    @property
    def name(self) -> str: ...

    @property
    def path(self) -> ItemPath: ...

    @property
    def is_public(self) -> bool: ...

    def derives_trait(self, trait: str) -> bool: ...


type TypePredicate = Callable[[TypeDeclaration], bool]


def is_public() -> TypePredicate:
    """Create predicate: declared pub."""

    def predicate(decl: TypeDeclaration) -> bool:
        return decl.is_public

    return predicate


def is_private() -> TypePredicate:
    """Create predicate: not declared pub."""

    def predicate(decl: TypeDeclaration) -> bool:
        return not decl.is_public

    return predicate


def has_simple_name(name: str) -> TypePredicate:
    """Create predicate: simple name equals name exactly.

    Args:
        name: Expected simple name

    Returns:
        Predicate function
    """

    def predicate(decl: TypeDeclaration) -> bool:
        return decl.name == name

    return predicate


def has_name_matching(pattern: str) -> TypePredicate:
    """Create predicate: simple name matches wildcard pattern.

    Args:
        pattern: Wildcard pattern, e.g. "*Matches"

    Returns:
        Predicate function
    """
    compiled = PathPattern(pattern)

    def predicate(decl: TypeDeclaration) -> bool:
        return compiled.matches(decl.name)

    return predicate


def resides_in_module(pattern: str) -> TypePredicate:
    """Create predicate: declaring namespace matches pattern.

    The type's own simple name is never part of the match.

    Args:
        pattern: Wildcard namespace pattern

    Returns:
        Predicate function
    """
    compiled = PathPattern(pattern)

    def predicate(decl: TypeDeclaration) -> bool:
        return decl.path.match_type_path(compiled)

    return predicate


def derives(trait: str) -> TypePredicate:
    """Create predicate: derive list contains trait.

    Args:
        trait: Trait name

    Returns:
        Predicate function
    """

    def predicate(decl: TypeDeclaration) -> bool:
        return decl.derives_trait(trait)

    return predicate


def named_in(type_names: Collection[str]) -> TypePredicate:
    """Create predicate: simple name is one of type_names.

    Used with the self-type names of matching impl blocks to answer
    "implements trait".

    Args:
        type_names: Accepted simple names

    Returns:
        Predicate function
    """
    names = frozenset(type_names)

    def predicate(decl: TypeDeclaration) -> bool:
        return decl.name in names

    return predicate
