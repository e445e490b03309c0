"""Struct declaration entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.enums import Visibility
    from archrules.domain.model.field import Field
    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.location import CodeSpan


@dataclass(frozen=True, slots=True)
class Struct:
    """Struct declared in a namespace.

    Identity inside one index is the arena handle, not deep equality:
    two structs with identical contents in different files are distinct.

    Attributes:
        handle: Arena handle assigned by the index (unique per index)
        path: Qualified path including the struct's own name
        name: Simple name
        visibility: Declared visibility
        derives: Derived trait names in declaration order
        fields: Fields in declaration order
        span: Source span of the declaration
        file: Source file containing the declaration
    """

    handle: int
    path: ItemPath
    name: str
    visibility: Visibility
    derives: tuple[str, ...]
    fields: tuple[Field, ...]
    span: CodeSpan
    file: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.handle < 0:
            raise ValueError(f"handle must be >= 0, got {self.handle}")
        if not self.name:
            raise ValueError("name must not be empty")
        if self.path.name != self.name:
            raise ValueError(f"path '{self.path}' must end with name '{self.name}'")
        for position, field in enumerate(self.fields):
            if field.index != position:
                raise ValueError(
                    f"field '{field.identifier}' has index {field.index}, expected {position}"
                )

    @property
    def is_public(self) -> bool:
        """True if declared pub."""
        return self.visibility.is_public

    def derives_trait(self, trait: str) -> bool:
        """Check if trait is in the derive list (exact name)."""
        return trait in self.derives

    def public_fields(self) -> tuple[Field, ...]:
        """Fields declared pub."""
        return tuple(f for f in self.fields if f.is_public)

    def private_fields(self) -> tuple[Field, ...]:
        """Fields not declared pub."""
        return tuple(f for f in self.fields if not f.is_public)
