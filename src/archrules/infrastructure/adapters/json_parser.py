"""JSON declaration dump adapter.

Implements SourceParserPort over a dump written by the external syntax
parser. Layout of the dump:

    {
      "files": {
        "lib.rs": {
          "uses": [{"path": "crate::rule", "span": [1, 0, 1, 16]}],
          "structs": [{
            "name": "Foo", "visibility": "public", "derives": ["Debug"],
            "span": [3, 0, 5, 1],
            "fields": [{"name": "x", "visibility": "inherited",
                        "type": "u32", "span": [4, 4, 4, 10]}]
          }],
          "enums": [{"name": "Kind", "visibility": "crate", "derives": [],
                     "variants": ["A", "B"], "span": [7, 0, 7, 20]}],
          "impls": [{"self_type": "Foo", "trait": "fmt::Debug",
                     "unsafe": false, "span": [9, 0, 11, 1]}],
          "modules": [{"name": "rule", "visibility": "public",
                       "span": [13, 0, 13, 12], "cfg": ["test"],
                       "body": {...}}]
        }
      }
    }

File keys are POSIX paths relative to the base directory. A module entry
with a "body" is an inline namespace; without one it is file-backed.
Spans are [start_line, start_column, end_line, end_column].
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from archrules.domain.exceptions.index import SourceParsingError
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

if TYPE_CHECKING:
    from collections.abc import Mapping


class JsonSourceParser(SourceParserPort):
    """Parser reading declarations from a JSON dump.

    The dump is read once, on first use. Source existence is answered
    from the dump, so the analyzed files need not be present on disk.

    FAIL-FIRST: raises SourceParsingError on any malformed entry.
    """

    def __init__(self, dump_path: Path, base_dir: Path | None = None) -> None:
        """Initialize parser.

        Args:
            dump_path: Path to the JSON dump
            base_dir: Directory file keys are relative to
                (default: the dump's directory)

        Raises:
            TypeError: If dump_path is None
        """
        if dump_path is None:
            raise TypeError("dump_path must not be None")

        self._dump_path = Path(dump_path)
        self._base_dir = Path(base_dir) if base_dir is not None else self._dump_path.parent
        self._files: Mapping[str, Any] | None = None

    def _load(self) -> Mapping[str, Any]:
        if self._files is not None:
            return self._files
        try:
            raw = json.loads(self._dump_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise SourceParsingError(self._dump_path, "declaration dump not found") from e
        except json.JSONDecodeError as e:
            raise SourceParsingError(self._dump_path, f"invalid JSON: {e}") from e

        files = raw.get("files") if isinstance(raw, dict) else None
        if not isinstance(files, dict):
            raise SourceParsingError(self._dump_path, "top-level 'files' object is missing")
        self._files = files
        return files

    def _key(self, path: Path) -> str:
        try:
            return Path(path).relative_to(self._base_dir).as_posix()
        except ValueError:
            return Path(path).as_posix()

    def has_source(self, path: Path) -> bool:
        """True if the dump has an entry for path."""
        return self._key(path) in self._load()

    def parse_file(self, path: Path) -> ParsedModule:
        """Read declarations of one file from the dump.

        Args:
            path: Source file path

        Returns:
            Declarations found directly in the file

        Raises:
            SourceParsingError: If the file is absent from the dump or its
                entry is malformed
        """
        payload = self._load().get(self._key(path))
        if payload is None:
            raise SourceParsingError(path, "file not present in declaration dump")
        try:
            return _module(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise SourceParsingError(path, f"malformed entry: {e!r}") from e


def _span(raw: list[int]) -> CodeSpan:
    if len(raw) != 4:
        raise ValueError(f"span must have 4 integers, got {raw!r}")
    return CodeSpan.of(*raw)


def _field(index: int, raw: Mapping[str, Any]) -> Field:
    return Field(
        index=index,
        name=raw.get("name"),
        visibility=Visibility.parse(raw.get("visibility", "inherited")),
        type_name=raw["type"],
        span=_span(raw["span"]),
    )


def _module(raw: Mapping[str, Any]) -> ParsedModule:
    return ParsedModule(
        uses=tuple(ModuleUse(path=u["path"], span=_span(u["span"])) for u in raw.get("uses", ())),
        structs=tuple(
            ParsedStruct(
                name=s["name"],
                visibility=Visibility.parse(s.get("visibility", "inherited")),
                span=_span(s["span"]),
                derives=tuple(s.get("derives", ())),
                fields=tuple(_field(i, f) for i, f in enumerate(s.get("fields", ()))),
            )
            for s in raw.get("structs", ())
        ),
        enums=tuple(
            ParsedEnum(
                name=e["name"],
                visibility=Visibility.parse(e.get("visibility", "inherited")),
                span=_span(e["span"]),
                derives=tuple(e.get("derives", ())),
                variants=tuple(e.get("variants", ())),
            )
            for e in raw.get("enums", ())
        ),
        impls=tuple(
            ParsedImpl(
                self_type=i.get("self_type", ""),
                trait=i.get("trait"),
                is_unsafe=bool(i.get("unsafe", False)),
                span=_span(i["span"]) if "span" in i else None,
            )
            for i in raw.get("impls", ())
        ),
        modules=tuple(
            ModuleDeclaration(
                name=m["name"],
                visibility=Visibility.parse(m.get("visibility", "inherited")),
                span=_span(m["span"]),
                cfg_tags=tuple(m.get("cfg", ())),
                body=_module(m["body"]) if "body" in m else None,
            )
            for m in raw.get("modules", ())
        ),
    )
