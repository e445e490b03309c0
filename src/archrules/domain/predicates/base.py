"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.enum_ import Enum
    from archrules.domain.model.impl_block import Impl
    from archrules.domain.model.module_tree import ModuleTree
    from archrules.domain.model.struct import Struct

# Type aliases for predicate functions
ModulePredicate = Callable[["ModuleTree"], bool]
StructPredicate = Callable[["Struct"], bool]
EnumPredicate = Callable[["Enum"], bool]
ImplPredicate = Callable[["Impl"], bool]
