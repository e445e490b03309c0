"""Domain ports (interfaces)."""

from archrules.domain.ports.source_parser import SourceParserPort

__all__ = ["SourceParserPort"]
