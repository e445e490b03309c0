"""Declaration index configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENTRY_FILES = ("lib.rs", "main.rs")
DEFAULT_SUBMODULE_LAYOUTS = ("{name}.rs", "{name}/mod.rs")


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Where the analyzed codebase lives and how its files are laid out.

    Attributes:
        source_root: Directory holding the entry file
        root_name: Name of the root namespace ("-" is replaced by "_")
        entry_files: Entry file names tried in order
        submodule_layouts: Relative layouts tried for a file-backed child
            namespace; "{name}" is replaced by the child's name
        project_root: Base for relative violation paths
            (default: parent of source_root)
    """

    source_root: Path
    root_name: str
    entry_files: tuple[str, ...] = DEFAULT_ENTRY_FILES
    submodule_layouts: tuple[str, ...] = DEFAULT_SUBMODULE_LAYOUTS
    project_root: Path | None = None

    def __post_init__(self) -> None:
        """Validate and normalize. FAIL-FIRST."""
        if self.source_root is None:
            raise TypeError("source_root must not be None")
        if not self.root_name:
            raise ValueError("root_name must not be empty")
        if not self.entry_files:
            raise ValueError("entry_files must not be empty")
        if not self.submodule_layouts:
            raise ValueError("submodule_layouts must not be empty")
        for layout in self.submodule_layouts:
            if "{name}" not in layout:
                raise ValueError(f"submodule layout '{layout}' must contain '{{name}}'")

        object.__setattr__(self, "source_root", Path(self.source_root))
        object.__setattr__(self, "root_name", self.root_name.replace("-", "_"))
        if self.project_root is None:
            object.__setattr__(self, "project_root", self.source_root.parent)
        else:
            object.__setattr__(self, "project_root", Path(self.project_root))

    @property
    def dir_layout_files(self) -> frozenset[str]:
        """File names that own their directory, e.g. "mod.rs".

        Taken from layouts of the form "{name}/<file>".
        """
        owners = set()
        for layout in self.submodule_layouts:
            head, sep, tail = layout.rpartition("/")
            if sep and head.endswith("{name}") and "{name}" not in tail:
                owners.add(tail)
        return frozenset(owners)
