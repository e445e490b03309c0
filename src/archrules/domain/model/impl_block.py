"""Impl block entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.location import CodeSpan


@dataclass(frozen=True, slots=True)
class Impl:
    """Impl block, inherent or trait.

    Used only to answer "does type T implement trait X". Lookup is by
    name: the self type's simple name must equal the candidate's name and
    the trait path must contain the trait as a substring. Generics, blanket
    impls and aliases are not resolved.

    Attributes:
        handle: Arena handle assigned by the index
        path: Namespace the impl block is declared in
        is_unsafe: True for `unsafe impl`
        self_type: Path of the implementing type (empty if not a path type)
        trait: Path of the implemented trait, None for inherent impls
        span: Source span of the block, if known
        file: Source file containing the block
    """

    handle: int
    path: ItemPath
    is_unsafe: bool
    self_type: ItemPath
    trait: ItemPath | None
    file: Path
    span: CodeSpan | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.handle < 0:
            raise ValueError(f"handle must be >= 0, got {self.handle}")

    @property
    def self_type_name(self) -> str:
        """Simple name of the implementing type."""
        return self.self_type.name

    def implements(self, trait: str) -> bool:
        """True if this is a trait impl whose path contains trait."""
        return self.trait is not None and self.trait.contains(trait)

    def is_for(self, type_name: str) -> bool:
        """True if the self type's simple name equals type_name."""
        return self.self_type_name == type_name
