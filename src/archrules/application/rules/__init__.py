"""Rule engine: conditions narrow, assertions check."""

from archrules.application.rules import assertions, conditions
from archrules.application.rules._engine import ArchRule
from archrules.application.rules.conjunction import Conjunction
from archrules.application.rules.module_rule import ModuleRule
from archrules.application.rules.reports import ViolationFactory
from archrules.application.rules.type_rules import EnumRule, StructRule, TypeDeclarationRule

__all__ = [
    "ArchRule",
    "TypeDeclarationRule",
    "StructRule",
    "EnumRule",
    "ModuleRule",
    "Conjunction",
    "ViolationFactory",
    "conditions",
    "assertions",
]
