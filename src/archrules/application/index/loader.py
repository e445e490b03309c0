"""Declaration index construction.

Walks the codebase top-down from its entry file, resolving every
file-backed child namespace to its source file, and freezes the result
into a DeclarationIndex.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archrules.application.index.declaration_index import DeclarationIndex
from archrules.domain.exceptions.index import ModuleResolutionError
from archrules.domain.model.enum_ import Enum
from archrules.domain.model.enums import Visibility
from archrules.domain.model.impl_block import Impl
from archrules.domain.model.item_path import ItemPath
from archrules.domain.model.module_tree import ModuleTree
from archrules.domain.model.struct import Struct

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.configuration import IndexConfig
    from archrules.domain.model.location import CodeSpan
    from archrules.domain.model.parsed_module import ModuleDeclaration, ParsedModule
    from archrules.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Arenas:
    """Mutable arenas filled during one build."""

    structs: list[Struct] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    impls: list[Impl] = field(default_factory=list)
    modules: int = 0


class IndexLoader:
    """Builds a DeclarationIndex from source files.

    Example:
        loader = IndexLoader(IndexConfig(Path("src"), "app"), JsonSourceParser(dump))
        index = loader.load()
    """

    def __init__(self, config: IndexConfig, parser: SourceParserPort) -> None:
        """Initialize loader.

        Args:
            config: Source layout configuration
            parser: Parser port implementation
        """
        if config is None:
            raise TypeError("config must not be None")
        if parser is None:
            raise TypeError("parser must not be None")
        self._config = config
        self._parser = parser

    def load(self) -> DeclarationIndex:
        """Build the whole tree.

        Returns:
            Immutable snapshot

        Raises:
            ModuleResolutionError: If the entry file or a declared child
                namespace file cannot be found
            SourceParsingError: If the parser rejects a file
        """
        config = self._config
        logger.debug(
            "building declaration index for '%s' from %s", config.root_name, config.source_root
        )

        entry = self._find_entry()
        arenas = _Arenas()
        root = self._build(
            path=ItemPath(config.root_name),
            visibility=Visibility.PUBLIC,
            file=entry,
            span=None,
            declared_in=None,
            cfg_tags=(),
            parsed=self._parser.parse_file(entry),
            search_dir=entry.parent,
            arenas=arenas,
        )

        index = DeclarationIndex(
            root,
            project_root=config.project_root,
            structs=arenas.structs,
            enums=arenas.enums,
            impls=arenas.impls,
        )
        logger.debug(
            "declaration index built: %d modules, %d structs, %d enums, %d impls",
            arenas.modules,
            len(arenas.structs),
            len(arenas.enums),
            len(arenas.impls),
        )
        return index

    def _find_entry(self) -> Path:
        candidates = tuple(self._config.source_root / name for name in self._config.entry_files)
        for candidate in candidates:
            if self._parser.has_source(candidate):
                return candidate
        raise ModuleResolutionError(self._config.source_root, self._config.root_name, candidates)

    def _resolve_child_file(self, search_dir: Path, name: str) -> Path:
        candidates = tuple(
            search_dir / layout.format(name=name) for layout in self._config.submodule_layouts
        )
        for candidate in candidates:
            if self._parser.has_source(candidate):
                logger.debug("resolved module '%s' to %s", name, candidate)
                return candidate
        raise ModuleResolutionError(search_dir, name, candidates)

    def _child_search_dir(self, file: Path) -> Path:
        # mod.rs-style files own their directory; name.rs owns name/
        if file.name in self._config.dir_layout_files:
            return file.parent
        return file.parent / file.stem

    def _build(
        self,
        *,
        path: ItemPath,
        visibility: Visibility,
        file: Path,
        span: CodeSpan | None,
        declared_in: Path | None,
        cfg_tags: tuple[str, ...],
        parsed: ParsedModule,
        search_dir: Path,
        arenas: _Arenas,
    ) -> ModuleTree:
        arenas.modules += 1

        structs = []
        for s in parsed.structs:
            struct = Struct(
                handle=len(arenas.structs),
                path=path.join(s.name),
                name=s.name,
                visibility=s.visibility,
                derives=s.derives,
                fields=s.fields,
                span=s.span,
                file=file,
            )
            arenas.structs.append(struct)
            structs.append(struct)

        enums = []
        for e in parsed.enums:
            enum = Enum(
                handle=len(arenas.enums),
                path=path.join(e.name),
                name=e.name,
                visibility=e.visibility,
                derives=e.derives,
                variants=e.variants,
                span=e.span,
                file=file,
            )
            arenas.enums.append(enum)
            enums.append(enum)

        impls = []
        for i in parsed.impls:
            impl = Impl(
                handle=len(arenas.impls),
                path=path,
                is_unsafe=i.is_unsafe,
                self_type=ItemPath(i.self_type),
                trait=ItemPath(i.trait) if i.trait is not None else None,
                file=file,
                span=i.span,
            )
            arenas.impls.append(impl)
            impls.append(impl)

        submodules = tuple(
            self._build_child(
                parent_path=path,
                parent_file=file,
                search_dir=search_dir,
                decl=decl,
                arenas=arenas,
            )
            for decl in parsed.modules
        )

        return ModuleTree(
            path=path,
            name=path.name,
            visibility=visibility,
            file=file,
            span=span,
            declared_in=declared_in,
            cfg_tags=cfg_tags,
            dependencies=parsed.uses,
            structs=tuple(structs),
            enums=tuple(enums),
            impls=tuple(impls),
            submodules=submodules,
        )

    def _build_child(
        self,
        *,
        parent_path: ItemPath,
        parent_file: Path,
        search_dir: Path,
        decl: ModuleDeclaration,
        arenas: _Arenas,
    ) -> ModuleTree:
        if decl.body is not None:
            # inline namespace: lives in the parent file, children under search_dir/name
            file = parent_file
            parsed = decl.body
            child_search_dir = search_dir / decl.name
        else:
            file = self._resolve_child_file(search_dir, decl.name)
            parsed = self._parser.parse_file(file)
            child_search_dir = self._child_search_dir(file)

        return self._build(
            path=parent_path.join(decl.name),
            visibility=decl.visibility,
            file=file,
            span=decl.span,
            declared_in=parent_file,
            cfg_tags=decl.cfg_tags,
            parsed=parsed,
            search_dir=child_search_dir,
            arenas=arenas,
        )


_CACHE: dict[IndexConfig, DeclarationIndex] = {}
_CACHE_LOCK = threading.Lock()


def load_index(config: IndexConfig, parser: SourceParserPort) -> DeclarationIndex:
    """Build the index once per configuration and reuse it afterwards.

    The first call for a configuration parses the codebase; every later
    call returns the identical snapshot, whatever parser is passed.

    Args:
        config: Source layout configuration (cache key)
        parser: Parser used on the first call

    Returns:
        Cached DeclarationIndex
    """
    index = _CACHE.get(config)
    if index is not None:
        return index
    with _CACHE_LOCK:
        index = _CACHE.get(config)
        if index is None:
            index = IndexLoader(config, parser).load()
            _CACHE[config] = index
        return index


def reset_index_cache() -> None:
    """Forget every cached index (test isolation)."""
    with _CACHE_LOCK:
        _CACHE.clear()
