"""Infrastructure adapters for external interfaces."""

from archrules.infrastructure.adapters.json_parser import JsonSourceParser

__all__ = ["JsonSourceParser"]
