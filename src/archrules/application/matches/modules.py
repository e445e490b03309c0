"""Namespace and dependency containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.application.matches._base import Matches

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator
    from pathlib import Path

    from archrules.domain.model.item_path import ItemPath
    from archrules.domain.model.module_tree import ModuleTree
    from archrules.domain.model.module_use import ModuleUse
    from archrules.domain.predicates.base import ModulePredicate


class ModuleMatches(Matches["ModuleTree"]):
    """Set of namespaces keyed by path."""

    __slots__ = ()

    @staticmethod
    def _key(member: ModuleTree) -> Hashable:
        return member.path

    @staticmethod
    def _sort_key(member: ModuleTree) -> tuple[str, int]:
        return (str(member.path), 0)

    def modules_that(self, predicate: ModulePredicate) -> ModuleMatches:
        """New container with namespaces satisfying predicate."""
        return self.that(predicate)

    def paths(self) -> frozenset[ItemPath]:
        """Paths of all members."""
        return frozenset(m.path for m in self)

    def get(self, path: ItemPath) -> ModuleTree | None:
        """Member with this path, if any."""
        return self._members.get(path)


@dataclass(frozen=True, slots=True)
class ModuleDependency:
    """Import edges declared directly in one namespace.

    Attributes:
        path: Namespace path
        file: Source file the imports are written in
        imports: Import edges in declaration order
    """

    path: ItemPath
    file: Path
    imports: tuple[ModuleUse, ...]


class ModuleDependencies:
    """Import edges per namespace path, in walk order."""

    __slots__ = ("_by_path",)

    def __init__(self, dependencies: Iterable[ModuleDependency] = ()) -> None:
        """Initialize from dependencies; later duplicates of a path are ignored."""
        self._by_path: dict[ItemPath, ModuleDependency] = {}
        for dep in dependencies:
            self._by_path.setdefault(dep.path, dep)

    def get(self, path: ItemPath) -> ModuleDependency | None:
        """Dependencies of one namespace, if reachable."""
        return self._by_path.get(path)

    def edges(self) -> Iterator[tuple[ModuleDependency, ModuleUse]]:
        """Every (namespace, import) pair."""
        for dep in self._by_path.values():
            for use in dep.imports:
                yield dep, use

    def __len__(self) -> int:
        return len(self._by_path)

    def __iter__(self) -> Iterator[ModuleDependency]:
        return iter(self._by_path.values())

    def __contains__(self, path: object) -> bool:
        return path in self._by_path
