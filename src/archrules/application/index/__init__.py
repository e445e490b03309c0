"""Declaration index: construction and traversal."""

from archrules.application.index.declaration_index import DeclarationIndex
from archrules.application.index.loader import IndexLoader, load_index, reset_index_cache

__all__ = [
    "DeclarationIndex",
    "IndexLoader",
    "load_index",
    "reset_index_cache",
]
