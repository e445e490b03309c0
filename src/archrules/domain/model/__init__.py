"""Domain model: value objects and entities."""

from archrules.domain.model.assertion_result import AssertionResult
from archrules.domain.model.configuration import IndexConfig
from archrules.domain.model.enum_ import Enum
from archrules.domain.model.enums import DeclarationKind, Visibility, ViolationKind
from archrules.domain.model.field import Field
from archrules.domain.model.filters import Filters
from archrules.domain.model.impl_block import Impl
from archrules.domain.model.item_path import ItemPath
from archrules.domain.model.layer import (
    Layer,
    LayerAssertion,
    LayeredArchitecture,
    LayeredArchitectureBuilder,
    MayNotBeAccessedByAnyLayer,
    MayOnlyBeAccessedByLayer,
    MayOnlyBeAccessedByLayers,
)
from archrules.domain.model.location import CodeSpan, LineColumn
from archrules.domain.model.module_tree import ModuleTree
from archrules.domain.model.module_use import ModuleUse
from archrules.domain.model.parsed_module import (
    ModuleDeclaration,
    ParsedEnum,
    ParsedImpl,
    ParsedModule,
    ParsedStruct,
)
from archrules.domain.model.path_pattern import PathPattern
from archrules.domain.model.struct import Struct
from archrules.domain.model.violation import RuleViolation

__all__ = [
    # Values
    "LineColumn",
    "CodeSpan",
    "ItemPath",
    "PathPattern",
    "Visibility",
    "ViolationKind",
    "DeclarationKind",
    "Filters",
    "IndexConfig",
    # Declarations
    "Field",
    "Struct",
    "Enum",
    "Impl",
    "ModuleUse",
    "ModuleTree",
    # Parser output
    "ParsedModule",
    "ParsedStruct",
    "ParsedEnum",
    "ParsedImpl",
    "ModuleDeclaration",
    # Results
    "RuleViolation",
    "AssertionResult",
    # Layers
    "Layer",
    "LayerAssertion",
    "LayeredArchitecture",
    "LayeredArchitectureBuilder",
    "MayNotBeAccessedByAnyLayer",
    "MayOnlyBeAccessedByLayers",
    "MayOnlyBeAccessedByLayer",
]
