"""Struct field value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.enums import Visibility
    from archrules.domain.model.location import CodeSpan


@dataclass(frozen=True, slots=True)
class Field:
    """Named or positional field of a struct.

    Attributes:
        index: Position in declaration order (0-based)
        name: Field name, None for positional fields
        visibility: Declared visibility
        type_name: Type signature as written in source
        span: Source span of the field
    """

    index: int
    name: str | None
    visibility: Visibility
    type_name: str
    span: CodeSpan

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if self.name is not None and not self.name:
            raise ValueError("name must be None or non-empty")
        if not self.type_name:
            raise ValueError("type_name must not be empty")

    @property
    def identifier(self) -> str:
        """Field name, or its positional index for unnamed fields."""
        return self.name if self.name is not None else str(self.index)

    @property
    def is_public(self) -> bool:
        """True if declared pub."""
        return self.visibility.is_public
