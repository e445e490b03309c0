"""Immutable snapshot of the analyzed codebase."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from archrules.application.matches import (
    EnumMatches,
    ImplMatches,
    ModuleDependencies,
    ModuleDependency,
    ModuleMatches,
    StructMatches,
)
from archrules.domain.model.filters import Filters

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archrules.domain.model.enum_ import Enum
    from archrules.domain.model.impl_block import Impl
    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.module_tree import ModuleTree
    from archrules.domain.model.struct import Struct
    from archrules.domain.predicates.base import ModulePredicate


class DeclarationIndex:
    """Namespace tree plus arenas of every struct, enum and impl block.

    Built once by IndexLoader and read-only afterwards; safe to share
    between rules. Arena position equals the declaration's handle.

    All traversals take Filters and prune whole subtrees whose root
    carries an excluded tag. The root namespace is never pruned.
    """

    __slots__ = ("_root", "_project_root", "_structs", "_enums", "_impls")

    def __init__(
        self,
        root: ModuleTree,
        *,
        project_root: Path,
        structs: Sequence[Struct] = (),
        enums: Sequence[Enum] = (),
        impls: Sequence[Impl] = (),
    ) -> None:
        """Initialize snapshot.

        Args:
            root: Root namespace
            project_root: Base directory for relative report paths
            structs: Struct arena, handle == position
            enums: Enum arena, handle == position
            impls: Impl arena, handle == position

        Raises:
            ValueError: If an arena handle does not match its position
        """
        for arena in (structs, enums, impls):
            for position, decl in enumerate(arena):
                if decl.handle != position:
                    raise ValueError(
                        f"{type(decl).__name__} '{decl.path}' has handle {decl.handle}, "
                        f"expected {position}"
                    )
        self._root = root
        self._project_root = Path(project_root)
        self._structs = tuple(structs)
        self._enums = tuple(enums)
        self._impls = tuple(impls)

    @property
    def root(self) -> ModuleTree:
        """Root namespace."""
        return self._root

    @property
    def root_name(self) -> str:
        """Name of the root namespace (what `crate` refers to)."""
        return self._root.name

    @property
    def project_root(self) -> Path:
        """Base directory for relative report paths."""
        return self._project_root

    def struct(self, handle: int) -> Struct:
        """Struct by arena handle."""
        return self._structs[handle]

    def enum(self, handle: int) -> Enum:
        """Enum by arena handle."""
        return self._enums[handle]

    def impl(self, handle: int) -> Impl:
        """Impl block by arena handle."""
        return self._impls[handle]

    @property
    def struct_count(self) -> int:
        """Number of structs in the whole tree."""
        return len(self._structs)

    @property
    def enum_count(self) -> int:
        """Number of enums in the whole tree."""
        return len(self._enums)

    @property
    def impl_count(self) -> int:
        """Number of impl blocks in the whole tree."""
        return len(self._impls)

    def find_module(self, path: ItemPath | str) -> ModuleTree | None:
        """Namespace with exactly this path, ignoring filters."""
        wanted = str(path)
        for module in self._root.walk(Filters.none()):
            if str(module.path) == wanted:
                return module
        return None

    def flatten(
        self, filters: Filters | None = None, start: ModuleTree | None = None
    ) -> ModuleMatches:
        """Every reachable namespace keyed by path.

        Args:
            filters: Exclusion filters (default: exclude nothing)
            start: Subtree root (default: the index root)

        Returns:
            Reachable namespaces
        """
        node = start or self._root
        return ModuleMatches(node.walk(filters or Filters.none()))

    def module_that(
        self, predicate: ModulePredicate, filters: Filters | None = None
    ) -> ModuleMatches:
        """Reachable namespaces satisfying predicate."""
        return self.flatten(filters).modules_that(predicate)

    def flatten_structs(
        self, filters: Filters | None = None, start: ModuleTree | None = None
    ) -> StructMatches:
        """Structs declared in reachable namespaces."""
        node = start or self._root
        return StructMatches(s for m in node.walk(filters or Filters.none()) for s in m.structs)

    def flatten_enums(
        self, filters: Filters | None = None, start: ModuleTree | None = None
    ) -> EnumMatches:
        """Enums declared in reachable namespaces."""
        node = start or self._root
        return EnumMatches(e for m in node.walk(filters or Filters.none()) for e in m.enums)

    def flatten_impls(
        self, filters: Filters | None = None, start: ModuleTree | None = None
    ) -> ImplMatches:
        """Impl blocks declared in reachable namespaces."""
        node = start or self._root
        return ImplMatches(i for m in node.walk(filters or Filters.none()) for i in m.impls)

    def flatten_deps(
        self, filters: Filters | None = None, start: ModuleTree | None = None
    ) -> ModuleDependencies:
        """Import edges per reachable namespace, with their source file."""
        node = start or self._root
        return ModuleDependencies(
            ModuleDependency(path=m.path, file=m.file, imports=m.dependencies)
            for m in node.walk(filters or Filters.none())
        )

    def relative_file(self, file: Path) -> Path:
        """File path relative to the project root, unchanged if outside it."""
        try:
            return file.relative_to(self._project_root)
        except ValueError:
            return file

    def __repr__(self) -> str:
        return (
            f"DeclarationIndex(root={self.root_name!r}, structs={self.struct_count}, "
            f"enums={self.enum_count}, impls={self.impl_count})"
        )
