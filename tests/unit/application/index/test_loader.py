"""Tests for application/index/loader.py."""

from pathlib import Path

import pytest

from archrules.application.index.loader import IndexLoader, load_index, reset_index_cache
from archrules.domain.exceptions.index import ModuleResolutionError
from archrules.domain.model.configuration import IndexConfig
from archrules.domain.model.enums import Visibility
from archrules.domain.model.item_path import ItemPath
from tests.factories import (
    SOURCE_ROOT,
    FakeParser,
    make_config,
    make_impl,
    make_index,
    make_mod,
    make_parsed,
    make_struct,
    make_use,
)


@pytest.fixture(autouse=True)
def _clean_cache():
    reset_index_cache()
    yield
    reset_index_cache()


class TestIndexLoaderEntry:
    """Tests for entry file discovery."""

    def test_lib_rs_preferred(self) -> None:
        index = make_index({"lib.rs": make_parsed(), "main.rs": make_parsed()})
        assert index.root.file == SOURCE_ROOT / "lib.rs"

    def test_main_rs_fallback(self) -> None:
        index = make_index({"main.rs": make_parsed()})
        assert index.root.file == SOURCE_ROOT / "main.rs"

    def test_missing_entry_raises(self) -> None:
        with pytest.raises(ModuleResolutionError, match="'app'"):
            make_index({"other.rs": make_parsed()})

    def test_root_node(self) -> None:
        index = make_index({"lib.rs": make_parsed(uses=(make_use("std::fmt"),))})
        root = index.root
        assert root.path == ItemPath("app")
        assert root.visibility is Visibility.PUBLIC
        assert root.span is None
        assert root.declared_in is None
        assert root.cfg_tags == ()
        assert [u.path for u in root.dependencies] == ["std::fmt"]

    def test_none_arguments_raise(self) -> None:
        with pytest.raises(TypeError, match="config must not be None"):
            IndexLoader(None, FakeParser({}))  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="parser must not be None"):
            IndexLoader(make_config(), None)  # type: ignore[arg-type]


class TestIndexLoaderResolution:
    """Tests for child namespace file resolution."""

    def test_flat_file_layout(self) -> None:
        index = make_index(
            {
                "lib.rs": make_parsed(modules=(make_mod("rule"),)),
                "rule.rs": make_parsed(modules=(make_mod("structs"),)),
                "rule/structs.rs": make_parsed(structs=(make_struct("Rule"),)),
            }
        )
        structs = index.find_module("app::rule::structs")
        assert structs is not None
        assert structs.file == SOURCE_ROOT / "rule" / "structs.rs"
        assert structs.declared_in == SOURCE_ROOT / "rule.rs"
        assert index.struct(0).path == ItemPath("app::rule::structs::Rule")

    def test_mod_rs_layout_owns_its_directory(self) -> None:
        index = make_index(
            {
                "lib.rs": make_parsed(modules=(make_mod("rule"),)),
                "rule/mod.rs": make_parsed(modules=(make_mod("structs"),)),
                "rule/structs.rs": make_parsed(),
            }
        )
        rule = index.find_module("app::rule")
        assert rule is not None
        assert rule.file == SOURCE_ROOT / "rule" / "mod.rs"
        assert index.find_module("app::rule::structs") is not None

    def test_inline_namespace(self) -> None:
        inline = make_parsed(structs=(make_struct("Inner"),), modules=(make_mod("deep"),))
        index = make_index(
            {
                "lib.rs": make_parsed(
                    modules=(make_mod("tests", body=inline, cfg_tags=("test",)),),
                ),
                "tests/deep.rs": make_parsed(),
            }
        )
        tests = index.find_module("app::tests")
        assert tests is not None
        assert tests.file == SOURCE_ROOT / "lib.rs"
        assert tests.cfg_tags == ("test",)
        assert index.struct(0).file == SOURCE_ROOT / "lib.rs"
        deep = index.find_module("app::tests::deep")
        assert deep is not None
        assert deep.file == SOURCE_ROOT / "tests" / "deep.rs"

    def test_missing_child_file_raises(self) -> None:
        with pytest.raises(ModuleResolutionError, match="'rule'") as exc_info:
            make_index({"lib.rs": make_parsed(modules=(make_mod("rule"),))})
        assert exc_info.value.candidates == (
            SOURCE_ROOT / "rule.rs",
            SOURCE_ROOT / "rule" / "mod.rs",
        )


class TestIndexLoaderArenas:
    """Tests for handle assignment."""

    def test_handles_in_walk_order(self) -> None:
        index = make_index(
            {
                "lib.rs": make_parsed(
                    structs=(make_struct("A"),),
                    impls=(make_impl("A", "Debug"),),
                    modules=(make_mod("m"),),
                ),
                "m.rs": make_parsed(structs=(make_struct("B"), make_struct("C", line=2))),
            }
        )
        assert [index.struct(h).name for h in range(index.struct_count)] == ["A", "B", "C"]
        assert index.impl(0).trait == ItemPath("Debug")
        assert index.impl(0).path == ItemPath("app")
        assert index.impl_count == 1
        assert index.enum_count == 0


class TestLoadIndexCache:
    """Tests for the process-wide cache."""

    def test_same_config_returns_identical_index(self) -> None:
        parser = FakeParser({"lib.rs": make_parsed()})
        first = load_index(make_config(), parser)
        second = load_index(make_config(), parser)
        assert first is second
        assert parser.parsed == [SOURCE_ROOT / "lib.rs"]

    def test_different_config_builds_again(self) -> None:
        parser = FakeParser({"lib.rs": make_parsed()})
        first = load_index(make_config("app"), parser)
        second = load_index(make_config("other"), parser)
        assert first is not second
        assert second.root_name == "other"

    def test_reset_forgets(self) -> None:
        parser = FakeParser({"lib.rs": make_parsed()})
        first = load_index(make_config(), parser)
        reset_index_cache()
        assert load_index(make_config(), parser) is not first

    def test_config_equality_is_cache_key(self) -> None:
        parser = FakeParser({"lib.rs": make_parsed()})
        config = IndexConfig(source_root=Path(str(SOURCE_ROOT)), root_name="app")
        assert load_index(config, parser) is load_index(
            IndexConfig(source_root=SOURCE_ROOT, root_name="app"), parser
        )
