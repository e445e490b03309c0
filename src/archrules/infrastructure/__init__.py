"""archrules infrastructure layer."""

from archrules.infrastructure.adapters import JsonSourceParser

__all__ = ["JsonSourceParser"]
