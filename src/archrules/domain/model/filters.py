"""Subtree exclusion filters."""

from __future__ import annotations

from dataclasses import dataclass

TEST_CFG = "test"


@dataclass(frozen=True, slots=True)
class Filters:
    """Build-conditional tags whose namespaces are skipped.

    Exclusion is subtree-wide: a namespace carrying an excluded tag is
    dropped together with all of its descendants.

    Attributes:
        exclude_cfg: Tags to exclude, e.g. {"test"}
    """

    exclude_cfg: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.exclude_cfg, frozenset):
            raise TypeError(f"exclude_cfg must be frozenset, got {type(self.exclude_cfg).__name__}")
        if any(not tag for tag in self.exclude_cfg):
            raise ValueError("exclude_cfg must not contain empty tags")

    @classmethod
    def none(cls) -> Filters:
        """Filters excluding nothing."""
        return cls()

    @classmethod
    def cfg_test(cls) -> Filters:
        """Filters excluding test-only namespaces."""
        return cls(frozenset({TEST_CFG}))

    def exclude_cfg_tag(self, tag: str) -> Filters:
        """Return new filters that also exclude tag."""
        if not tag:
            raise ValueError("tag must not be empty")
        return Filters(self.exclude_cfg | {tag})

    def excludes(self, cfg_tags: tuple[str, ...] | frozenset[str]) -> bool:
        """True if any of cfg_tags is excluded."""
        return not self.exclude_cfg.isdisjoint(cfg_tags)
