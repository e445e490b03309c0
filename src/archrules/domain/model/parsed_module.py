"""Raw parser output for one source file.

These DTOs cross the parser port. The index loader turns them into
`ModuleTree` nodes, assigning paths and arena handles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.enums import Visibility
    from archrules.domain.model.field import Field
    from archrules.domain.model.location import CodeSpan
    from archrules.domain.model.module_use import ModuleUse


@dataclass(frozen=True, slots=True)
class ParsedStruct:
    """Struct as read from source."""

    name: str
    visibility: Visibility
    span: CodeSpan
    derives: tuple[str, ...] = ()
    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")


@dataclass(frozen=True, slots=True)
class ParsedEnum:
    """Enum as read from source."""

    name: str
    visibility: Visibility
    span: CodeSpan
    derives: tuple[str, ...] = ()
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")


@dataclass(frozen=True, slots=True)
class ParsedImpl:
    """Impl block as read from source.

    Attributes:
        self_type: Implementing type path ("" when not a path type)
        trait: Implemented trait path, None for inherent impls
        is_unsafe: True for `unsafe impl`
        span: Block span, if known
    """

    self_type: str
    trait: str | None = None
    is_unsafe: bool = False
    span: CodeSpan | None = None


@dataclass(frozen=True, slots=True)
class ModuleDeclaration:
    """Child namespace declared in a file.

    Attributes:
        name: Namespace name
        visibility: Declared visibility
        span: Span of the declaration
        cfg_tags: Build-conditional tags
        body: Contents for inline namespaces, None when file-backed
    """

    name: str
    visibility: Visibility
    span: CodeSpan
    cfg_tags: tuple[str, ...] = ()
    body: ParsedModule | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def is_inline(self) -> bool:
        """True if the body is written in the declaring file."""
        return self.body is not None


@dataclass(frozen=True, slots=True)
class ParsedModule:
    """Declarations found directly in one file or inline namespace."""

    uses: tuple[ModuleUse, ...] = ()
    structs: tuple[ParsedStruct, ...] = ()
    enums: tuple[ParsedEnum, ...] = ()
    impls: tuple[ParsedImpl, ...] = ()
    modules: tuple[ModuleDeclaration, ...] = ()
