"""Base class for declaration set containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Protocol, Self


class Matches[T](ABC):
    """Deduplicated set of declarations narrowed by predicates.

    Members are keyed by a stable identity (arena handle or namespace
    path), never by deep equality. Iteration order is insertion order;
    use sorted() for deterministic reports.

    Composition:
        OR: extend() unions another container into this one in place
        AND: that() returns a new, narrower container to replace this one
    """

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[T] = ()) -> None:
        """Initialize from members; later duplicates of a key are ignored."""
        self._members: dict[Hashable, T] = {}
        for member in members:
            self._members.setdefault(self._key(member), member)

    @staticmethod
    @abstractmethod
    def _key(member: T) -> Hashable:
        """Identity of a member."""

    @staticmethod
    @abstractmethod
    def _sort_key(member: T) -> tuple[str, int]:
        """Deterministic ordering of members."""

    def that(self, predicate: Callable[[T], bool]) -> Self:
        """New container with only members satisfying predicate."""
        return type(self)(m for m in self._members.values() if predicate(m))

    def extend(self, other: Matches[T]) -> None:
        """Union other into this container in place."""
        for key, member in other._members.items():
            self._members.setdefault(key, member)

    def empty(self) -> Self:
        """New empty container of the same kind."""
        return type(self)()

    def is_empty(self) -> bool:
        """True if there are no members."""
        return not self._members

    def sorted(self) -> list[T]:
        """Members ordered by path."""
        return sorted(self._members.values(), key=self._sort_key)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[T]:
        return iter(self._members.values())

    def __contains__(self, item: object) -> bool:
        try:
            key = self._key(item)  # type: ignore[arg-type]
        except AttributeError:
            return False
        return key in self._members

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} members)"


class HasHandle(Protocol):
    """Declaration stored in an index arena."""

    @property
    def handle(self) -> int: ...


class DeclarationMatches[T: HasHandle](Matches[T]):
    """Matches keyed by arena handle."""

    __slots__ = ()

    @staticmethod
    def _key(member: T) -> Hashable:
        return member.handle

    @staticmethod
    def _sort_key(member: T) -> tuple[str, int]:
        return (str(member.path), member.handle)  # type: ignore[attr-defined]

    def handles(self) -> frozenset[int]:
        """Arena handles of all members."""
        return frozenset(self._members)  # type: ignore[arg-type]
