"""Namespace node of the declaration index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.exceptions.index import IndexInvariantError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from archrules.domain.model.enum_ import Enum
    from archrules.domain.model.enums import Visibility
    from archrules.domain.model.filters import Filters
    from archrules.domain.model.impl_block import Impl
    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.location import CodeSpan
    from archrules.domain.model.module_use import ModuleUse
    from archrules.domain.model.struct import Struct


@dataclass(frozen=True, slots=True)
class ModuleTree:
    """One namespace with its declarations and child namespaces.

    Immutable once built. Paths mirror parent-join-child exactly.

    Attributes:
        path: Qualified path (the root's path is the root name)
        name: Simple name
        visibility: Declared visibility (the root is public)
        file: Source file the namespace lives in
        span: Span of the namespace declaration, None for the root
        declared_in: File holding the declaration, None for the root
        cfg_tags: Build-conditional tags, e.g. ("test",)
        dependencies: Import edges declared directly here, in order
        structs: Structs declared directly here
        enums: Enums declared directly here
        impls: Impl blocks declared directly here
        submodules: Child namespaces in declaration order
    """

    path: ItemPath
    name: str
    visibility: Visibility
    file: Path
    span: CodeSpan | None
    declared_in: Path | None = None
    cfg_tags: tuple[str, ...] = ()
    dependencies: tuple[ModuleUse, ...] = ()
    structs: tuple[Struct, ...] = ()
    enums: tuple[Enum, ...] = ()
    impls: tuple[Impl, ...] = ()
    submodules: tuple[ModuleTree, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.path.name != self.name:
            raise ValueError(f"path '{self.path}' must end with name '{self.name}'")
        seen: set[str] = set()
        for child in self.submodules:
            expected = self.path.join(child.name)
            if child.path != expected:
                raise ValueError(f"submodule path '{child.path}' must be '{expected}'")
            if child.name in seen:
                raise ValueError(f"duplicate submodule '{child.name}' in '{self.path}'")
            seen.add(child.name)

    @property
    def is_public(self) -> bool:
        """True if declared pub."""
        return self.visibility.is_public

    @property
    def is_root(self) -> bool:
        """True for the synthetic root namespace (no declaration span)."""
        return self.span is None

    def require_declaration(self) -> tuple[Path, CodeSpan]:
        """Return file and span of the namespace declaration.

        Raises:
            IndexInvariantError: For the root namespace, which is not declared
        """
        if self.span is None or self.declared_in is None:
            raise IndexInvariantError(f"namespace '{self.path}' has no declaration span")
        return self.declared_in, self.span

    def is_excluded(self, filters: Filters) -> bool:
        """True if this namespace carries an excluded tag."""
        return filters.excludes(self.cfg_tags)

    def walk(self, filters: Filters) -> Iterator[ModuleTree]:
        """Yield this node and all descendants, pre-order.

        Children carrying an excluded tag are skipped with their whole
        subtree. The starting node is always yielded.

        Args:
            filters: Exclusion filters

        Yields:
            Namespace nodes
        """
        stack: list[ModuleTree] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(
                child for child in reversed(node.submodules) if not child.is_excluded(filters)
            )
