"""Impl block predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.impl_block import Impl
    from archrules.domain.predicates.base import ImplPredicate


def implements_trait(trait: str) -> ImplPredicate:
    """Create predicate: trait impl whose trait path contains trait."""

    def predicate(impl: Impl) -> bool:
        return impl.implements(trait)

    return predicate


def is_for_type(type_name: str) -> ImplPredicate:
    """Create predicate: self type simple name equals type_name."""

    def predicate(impl: Impl) -> bool:
        return impl.is_for(type_name)

    return predicate
