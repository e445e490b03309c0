"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
Indexes are built through the real IndexLoader over an in-memory parser,
so handles, paths and files are exactly what production code produces.
"""

from collections.abc import Mapping
from pathlib import Path

from archrules.application.index.declaration_index import DeclarationIndex
from archrules.application.index.loader import IndexLoader
from archrules.domain.exceptions.index import SourceParsingError
from archrules.domain.model.configuration import IndexConfig
from archrules.domain.model.enums import Visibility
from archrules.domain.model.field import Field
from archrules.domain.model.location import CodeSpan
from archrules.domain.model.module_use import ModuleUse
from archrules.domain.model.parsed_module import (
    ModuleDeclaration,
    ParsedEnum,
    ParsedImpl,
    ParsedModule,
    ParsedStruct,
)
from archrules.domain.ports.source_parser import SourceParserPort

# Default project layout - consistent across all tests
PROJECT_ROOT = Path("/project")
SOURCE_ROOT = PROJECT_ROOT / "src"
ROOT_NAME = "app"


def make_span(line: int = 1, column: int = 0, end_line: int | None = None) -> CodeSpan:
    """Create a CodeSpan for tests.

    Args:
        line: Start line (default 1)
        column: Start column (default 0)
        end_line: End line (default same as line)

    Returns:
        CodeSpan ending 10 columns after the start column
    """
    return CodeSpan.of(line, column, end_line or line, column + 10)


def make_use(path: str, line: int = 1) -> ModuleUse:
    """Create an import edge on one line."""
    return ModuleUse(path=path, span=make_span(line))


def make_field(
    index: int,
    name: str | None,
    visibility: Visibility = Visibility.INHERITED,
    type_name: str = "u32",
    line: int = 1,
) -> Field:
    """Create a Field for tests."""
    return Field(
        index=index,
        name=name,
        visibility=visibility,
        type_name=type_name,
        span=make_span(line, 4),
    )


def make_struct(
    name: str,
    visibility: Visibility = Visibility.PUBLIC,
    derives: tuple[str, ...] = (),
    fields: tuple[Field, ...] = (),
    line: int = 1,
) -> ParsedStruct:
    """Create a parsed struct declaration."""
    return ParsedStruct(
        name=name,
        visibility=visibility,
        span=make_span(line),
        derives=derives,
        fields=fields,
    )


def make_enum(
    name: str,
    visibility: Visibility = Visibility.PUBLIC,
    derives: tuple[str, ...] = (),
    line: int = 1,
) -> ParsedEnum:
    """Create a parsed enum declaration."""
    return ParsedEnum(
        name=name,
        visibility=visibility,
        span=make_span(line),
        derives=derives,
        variants=("A", "B"),
    )


def make_impl(self_type: str, trait: str | None = None) -> ParsedImpl:
    """Create a parsed impl block."""
    return ParsedImpl(self_type=self_type, trait=trait)


def make_mod(
    name: str,
    visibility: Visibility = Visibility.PUBLIC,
    line: int = 1,
    cfg_tags: tuple[str, ...] = (),
    body: ParsedModule | None = None,
) -> ModuleDeclaration:
    """Create a namespace declaration (inline when body is given)."""
    return ModuleDeclaration(
        name=name,
        visibility=visibility,
        span=make_span(line),
        cfg_tags=cfg_tags,
        body=body,
    )


def make_parsed(
    *,
    uses: tuple[ModuleUse, ...] = (),
    structs: tuple[ParsedStruct, ...] = (),
    enums: tuple[ParsedEnum, ...] = (),
    impls: tuple[ParsedImpl, ...] = (),
    modules: tuple[ModuleDeclaration, ...] = (),
) -> ParsedModule:
    """Create the contents of one source file."""
    return ParsedModule(uses=uses, structs=structs, enums=enums, impls=impls, modules=modules)


class FakeParser(SourceParserPort):
    """In-memory parser keyed by path relative to SOURCE_ROOT."""

    def __init__(self, files: Mapping[str, ParsedModule]) -> None:
        self.files = {SOURCE_ROOT / name: parsed for name, parsed in files.items()}
        self.parsed: list[Path] = []

    def has_source(self, path: Path) -> bool:
        return path in self.files

    def parse_file(self, path: Path) -> ParsedModule:
        self.parsed.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise SourceParsingError(path, "no such file") from None


def make_config(root_name: str = ROOT_NAME) -> IndexConfig:
    """Create the default test configuration."""
    return IndexConfig(source_root=SOURCE_ROOT, root_name=root_name, project_root=PROJECT_ROOT)


def make_index(files: Mapping[str, ParsedModule], root_name: str = ROOT_NAME) -> DeclarationIndex:
    """Build an index from file contents.

    Args:
        files: Path relative to SOURCE_ROOT -> file contents; must include lib.rs
        root_name: Root namespace name

    Returns:
        Freshly built (uncached) DeclarationIndex
    """
    return IndexLoader(make_config(root_name), FakeParser(files)).load()


def make_layered_index() -> DeclarationIndex:
    """Index with rule, ast and other namespaces importing each other.

    Layout:
        app::rule   (struct Rule)
        app::ast    uses crate::rule::Rule
        app::other  uses crate::rule::Rule, app::ast::Node
    """
    return make_index(
        {
            "lib.rs": make_parsed(
                modules=(
                    make_mod("rule", line=1),
                    make_mod("ast", line=2),
                    make_mod("other", line=3),
                ),
            ),
            "rule.rs": make_parsed(structs=(make_struct("Rule"),)),
            "ast.rs": make_parsed(
                uses=(make_use("crate::rule::Rule", line=1),),
                structs=(make_struct("Node"),),
            ),
            "other.rs": make_parsed(
                uses=(
                    make_use("crate::rule::Rule", line=1),
                    make_use("app::ast::Node", line=2),
                ),
            ),
        }
    )
