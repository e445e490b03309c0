"""Declaration set algebra."""

from archrules.application.matches._base import DeclarationMatches, Matches
from archrules.application.matches.declarations import EnumMatches, ImplMatches, StructMatches
from archrules.application.matches.modules import (
    ModuleDependencies,
    ModuleDependency,
    ModuleMatches,
)

__all__ = [
    "Matches",
    "DeclarationMatches",
    "ModuleMatches",
    "StructMatches",
    "EnumMatches",
    "ImplMatches",
    "ModuleDependency",
    "ModuleDependencies",
]
