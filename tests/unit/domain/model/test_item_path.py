"""Tests for domain/model/item_path.py."""

import pytest

from archrules.domain.model.item_path import ItemPath
from archrules.domain.model.path_pattern import PathPattern


class TestItemPathCreation:
    """Tests for ItemPath validation."""

    def test_empty_allowed(self) -> None:
        path = ItemPath.empty()
        assert path.is_empty
        assert path.segments == ()

    def test_leading_separator_raises(self) -> None:
        with pytest.raises(ValueError, match="must not start or end"):
            ItemPath("::app")

    def test_trailing_separator_raises(self) -> None:
        with pytest.raises(ValueError, match="must not start or end"):
            ItemPath("app::")

    def test_is_frozen(self) -> None:
        path = ItemPath("app")
        with pytest.raises(AttributeError):
            path.value = "other"  # type: ignore[misc]


class TestItemPathNavigation:
    """Tests for join, name, parent, segments."""

    def test_join(self) -> None:
        assert ItemPath("app").join("rule") == ItemPath("app::rule")

    def test_join_onto_empty(self) -> None:
        assert ItemPath.empty().join("app") == ItemPath("app")

    def test_join_empty_segment_raises(self) -> None:
        with pytest.raises(ValueError, match="segment must not be empty"):
            ItemPath("app").join("")

    def test_name_is_last_segment(self) -> None:
        assert ItemPath("app::rule::Rule").name == "Rule"

    def test_parent(self) -> None:
        assert ItemPath("app::rule::Rule").parent == ItemPath("app::rule")
        assert ItemPath("app").parent is None

    def test_segments(self) -> None:
        assert ItemPath("app::rule").segments == ("app", "rule")

    def test_str(self) -> None:
        assert str(ItemPath("app::rule")) == "app::rule"


class TestItemPathMatching:
    """Tests for prefix and pattern helpers."""

    def test_reside_in_stops_at_segment_boundary(self) -> None:
        path = ItemPath("app::rule::structs")
        assert path.reside_in("app::rule")
        assert not path.reside_in("app::ast")
        assert ItemPath("app::rule").reside_in("app::rule")
        assert not ItemPath("app::ruler").reside_in("app::rule")

    def test_reside_in_any(self) -> None:
        assert ItemPath("app::ast::node").reside_in_any(("app::rule", "app::ast"))
        assert not ItemPath("app::ast").reside_in_any(())

    def test_match_module_and_type_path(self) -> None:
        path = ItemPath("app::model::Order")
        assert path.match_module_path(PathPattern("app::model::*"))
        assert path.match_type_path(PathPattern("app::model"))
        assert not path.match_type_path(PathPattern("app::model::Order"))

    def test_contains(self) -> None:
        assert ItemPath("std::fmt::Debug").contains("Debug")
