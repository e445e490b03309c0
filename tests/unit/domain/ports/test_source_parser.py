"""Tests for domain/ports/source_parser.py."""

from pathlib import Path

import pytest

from archrules.domain.ports.source_parser import SourceParserPort
from tests.factories import make_parsed


class StaticParser(SourceParserPort):
    """Returns the same empty module for every path."""

    def parse_file(self, path: Path):
        return make_parsed()


class TestSourceParserPort:
    """Tests for the parser port contract."""

    def test_cannot_instantiate_port(self) -> None:
        with pytest.raises(TypeError):
            SourceParserPort()  # type: ignore[abstract]

    def test_parse_file_annotation_is_deferred(self) -> None:
        assert SourceParserPort.parse_file.__annotations__["return"] == "ParsedModule"

    def test_subclass_parses(self) -> None:
        assert StaticParser().parse_file(Path("src/lib.rs")) == make_parsed()

    def test_has_source_checks_filesystem(self, tmp_path: Path) -> None:
        source = tmp_path / "lib.rs"
        assert not StaticParser().has_source(source)
        source.write_text("", encoding="utf-8")
        assert StaticParser().has_source(source)
