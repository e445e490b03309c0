"""Fluent API for architecture rules.

Public exports:
    ArchRules: Entry point for fluent DSL
    StructQuery/StructAssertion: Struct query and assertion builders
    EnumQuery/EnumAssertion: Enum query and assertion builders
    ModuleQuery/ModuleAssertion: Namespace query and assertion builders
    ArchitectureQuery: Layered architecture builder
    layered_architecture: Shortcut creating an ArchitectureQuery
"""

from archrules.presentation.api.dsl import (
    ArchRules,
    EnumAssertion,
    EnumQuery,
    ModuleAssertion,
    ModuleQuery,
    StructAssertion,
    StructQuery,
)
from archrules.presentation.api.layers import ArchitectureQuery, layered_architecture

__all__ = [
    "ArchRules",
    "ArchitectureQuery",
    "EnumAssertion",
    "EnumQuery",
    "ModuleAssertion",
    "ModuleQuery",
    "StructAssertion",
    "StructQuery",
    "layered_architecture",
]
