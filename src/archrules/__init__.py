"""archrules - architecture rules over a declaration index of a crate-style codebase."""

__version__ = "0.1.0"

from archrules.application.index.loader import load_index
from archrules.domain.model.configuration import IndexConfig
from archrules.domain.model.filters import Filters
from archrules.infrastructure.adapters.json_parser import JsonSourceParser
from archrules.presentation.api.dsl import ArchRules
from archrules.presentation.api.layers import layered_architecture

__all__ = [
    "ArchRules",
    "Filters",
    "IndexConfig",
    "JsonSourceParser",
    "layered_architecture",
    "load_index",
    "__version__",
]
