"""archrules domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, re, collections.abc
"""

from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ArchRulesError,
    IndexInvariantError,
    ModuleResolutionError,
    RuleValidationError,
    SourceParsingError,
    UndefinedLayerError,
)
from archrules.domain.model import (
    AssertionResult,
    CodeSpan,
    Enum,
    Field,
    Filters,
    Impl,
    IndexConfig,
    ItemPath,
    Layer,
    LayeredArchitecture,
    LineColumn,
    ModuleTree,
    ModuleUse,
    ParsedModule,
    PathPattern,
    RuleViolation,
    Struct,
    ViolationKind,
    Visibility,
)
from archrules.domain.ports import SourceParserPort

__all__ = [
    # Exceptions
    "ArchRulesError",
    "ModuleResolutionError",
    "SourceParsingError",
    "IndexInvariantError",
    "RuleValidationError",
    "UndefinedLayerError",
    "ArchitectureViolationError",
    # Values
    "LineColumn",
    "CodeSpan",
    "ItemPath",
    "PathPattern",
    "Visibility",
    "ViolationKind",
    "Filters",
    "IndexConfig",
    # Entities
    "Field",
    "Struct",
    "Enum",
    "Impl",
    "ModuleUse",
    "ModuleTree",
    "ParsedModule",
    # Results
    "RuleViolation",
    "AssertionResult",
    # Layers
    "Layer",
    "LayeredArchitecture",
    # Ports
    "SourceParserPort",
]
