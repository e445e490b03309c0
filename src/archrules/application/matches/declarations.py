"""Struct, enum and impl block containers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.application.matches._base import DeclarationMatches
from archrules.domain.model.enum_ import Enum
from archrules.domain.model.impl_block import Impl
from archrules.domain.model.struct import Struct

if TYPE_CHECKING:
    from archrules.domain.predicates.base import EnumPredicate, ImplPredicate, StructPredicate


class StructMatches(DeclarationMatches[Struct]):
    """Set of structs."""

    __slots__ = ()

    def structs_that(self, predicate: StructPredicate) -> StructMatches:
        """New container with structs satisfying predicate."""
        return self.that(predicate)


class EnumMatches(DeclarationMatches[Enum]):
    """Set of enums."""

    __slots__ = ()

    def enums_that(self, predicate: EnumPredicate) -> EnumMatches:
        """New container with enums satisfying predicate."""
        return self.that(predicate)


class ImplMatches(DeclarationMatches[Impl]):
    """Set of impl blocks."""

    __slots__ = ()

    def impl_that(self, predicate: ImplPredicate) -> ImplMatches:
        """New container with impl blocks satisfying predicate."""
        return self.that(predicate)

    def types(self) -> frozenset[str]:
        """Simple names of the implementing self types."""
        return frozenset(impl.self_type_name for impl in self)
