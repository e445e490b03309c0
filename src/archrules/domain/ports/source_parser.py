"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.parsed_module import ParsedModule


class SourceParserPort(ABC):
    """Port for reading declarations out of one source file.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_file(self, path: Path) -> ParsedModule:
        """Parse single source file.

        Args:
            path: Path to the source file

        Returns:
            Declarations found directly in the file

        Raises:
            SourceParsingError: If file cannot be parsed
        """
        ...

    def has_source(self, path: Path) -> bool:
        """Check if a source file exists at path.

        Used by the index loader to resolve child namespace layouts.
        Adapters not backed by the filesystem override this.
        """
        return path.is_file()
