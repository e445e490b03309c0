"""archrules application layer.

Index construction, set algebra, rule engine, layer checker, reporters.
"""

from archrules.application.index import DeclarationIndex, IndexLoader, load_index
from archrules.application.layers import LayerChecker
from archrules.application.rules import EnumRule, ModuleRule, StructRule

__all__ = [
    "DeclarationIndex",
    "IndexLoader",
    "load_index",
    "StructRule",
    "EnumRule",
    "ModuleRule",
    "LayerChecker",
]
