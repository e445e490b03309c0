"""Declaration predicates."""

from archrules.domain.predicates import (
    declaration_predicates,
    impl_predicates,
    module_predicates,
)
from archrules.domain.predicates.base import (
    EnumPredicate,
    ImplPredicate,
    ModulePredicate,
    StructPredicate,
)

__all__ = [
    "ModulePredicate",
    "StructPredicate",
    "EnumPredicate",
    "ImplPredicate",
    "declaration_predicates",
    "module_predicates",
    "impl_predicates",
]
