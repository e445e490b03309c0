"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from archrules.domain.model.configuration import IndexConfig


class TestIndexConfigCreation:
    """Tests for defaults and normalization."""

    def test_defaults(self) -> None:
        config = IndexConfig(source_root=Path("/p/src"), root_name="app")
        assert config.entry_files == ("lib.rs", "main.rs")
        assert config.submodule_layouts == ("{name}.rs", "{name}/mod.rs")
        assert config.project_root == Path("/p")

    def test_dash_replaced_in_root_name(self) -> None:
        assert IndexConfig(Path("src"), "my-crate").root_name == "my_crate"

    def test_string_paths_converted(self) -> None:
        config = IndexConfig("src", "app", project_root=".")  # type: ignore[arg-type]
        assert config.source_root == Path("src")
        assert config.project_root == Path()

    def test_dir_layout_files(self) -> None:
        config = IndexConfig(Path("src"), "app")
        assert config.dir_layout_files == frozenset({"mod.rs"})

    def test_hashable(self) -> None:
        a = IndexConfig(Path("src"), "app")
        b = IndexConfig(Path("src"), "app")
        assert {a: 1}[b] == 1


class TestIndexConfigFailFirst:
    """Tests for FAIL-FIRST validation."""

    def test_empty_root_name_raises(self) -> None:
        with pytest.raises(ValueError, match="root_name must not be empty"):
            IndexConfig(Path("src"), "")

    def test_empty_entry_files_raises(self) -> None:
        with pytest.raises(ValueError, match="entry_files must not be empty"):
            IndexConfig(Path("src"), "app", entry_files=())

    def test_layout_without_placeholder_raises(self) -> None:
        with pytest.raises(ValueError, match="must contain"):
            IndexConfig(Path("src"), "app", submodule_layouts=("mod.rs",))

    def test_none_source_root_raises(self) -> None:
        with pytest.raises(TypeError, match="source_root must not be None"):
            IndexConfig(None, "app")  # type: ignore[arg-type]
