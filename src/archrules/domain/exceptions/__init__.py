"""Domain exceptions."""

from archrules.domain.exceptions.base import ArchRulesError
from archrules.domain.exceptions.index import (
    IndexInvariantError,
    ModuleResolutionError,
    SourceParsingError,
)
from archrules.domain.exceptions.validation import RuleValidationError, UndefinedLayerError
from archrules.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "ArchRulesError",
    "ModuleResolutionError",
    "SourceParsingError",
    "IndexInvariantError",
    "RuleValidationError",
    "UndefinedLayerError",
    "ArchitectureViolationError",
]
