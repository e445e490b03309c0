"""Tests for presentation/api/dsl.py."""

from pathlib import Path

import pytest

from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.enums import ViolationKind, Visibility
from archrules.domain.model.filters import Filters
from archrules.presentation.api.dsl import (
    ArchRules,
    EnumQuery,
    ModuleAssertion,
    ModuleQuery,
    StructAssertion,
    StructQuery,
)
from archrules.presentation.api.layers import ArchitectureQuery
from tests.factories import (
    make_enum,
    make_field,
    make_index,
    make_mod,
    make_parsed,
    make_struct,
    make_use,
)


@pytest.fixture
def arch() -> ArchRules:
    """Two structs named Foo (one private), a Node with a pub field, a test-only struct."""
    index = make_index(
        {
            "lib.rs": make_parsed(
                structs=(make_struct("Foo", Visibility.INHERITED, derives=("Debug",), line=5),),
                enums=(make_enum("Kind", derives=("Debug",), line=7),),
                modules=(
                    make_mod("rule", line=1),
                    make_mod("ast", line=2),
                    make_mod("tests", Visibility.INHERITED, line=3, cfg_tags=("test",)),
                ),
            ),
            "rule.rs": make_parsed(
                uses=(make_use("crate::ast::Node"),),
                structs=(make_struct("Foo", line=2),),
            ),
            "ast.rs": make_parsed(
                uses=(make_use("std::fmt"),),
                structs=(
                    make_struct("Node", fields=(make_field(0, "id", Visibility.PUBLIC),), line=2),
                ),
            ),
            "tests.rs": make_parsed(structs=(make_struct("Fixture", Visibility.INHERITED),)),
        }
    )
    return ArchRules(index)


class TestArchRulesInit:
    """Tests for ArchRules construction and entry points."""

    def test_none_index_raises(self) -> None:
        with pytest.raises(TypeError, match="index must not be None"):
            ArchRules(None)  # type: ignore[arg-type]

    def test_default_filters_exclude_nothing(self, arch: ArchRules) -> None:
        assert arch.filters == Filters.none()

    def test_entry_points(self, arch: ArchRules) -> None:
        assert isinstance(arch.structs(), StructQuery)
        assert isinstance(arch.enums(), EnumQuery)
        assert isinstance(arch.modules(), ModuleQuery)
        assert isinstance(arch.layered_architecture(), ArchitectureQuery)

    def test_should_returns_matching_assertion(self, arch: ArchRules) -> None:
        assert isinstance(arch.structs().should(), StructAssertion)
        assert isinstance(arch.modules().should(), ModuleAssertion)


class TestStructRules:
    """End-to-end struct rules."""

    def test_narrowed_rule_passes(self, arch: ArchRules) -> None:
        result = (
            arch.structs()
            .have_simple_name("Foo")
            .and_()
            .are_declared_private()
            .should()
            .derive("Debug")
            .collect()
        )
        assert result.passed
        assert result.expected == (
            "Structs that have simple name 'Foo' and are declared private to derive 'Debug'"
        )

    def test_broadened_rule_fails_on_public_foo(self, arch: ArchRules) -> None:
        result = arch.structs().have_simple_name("Foo").should().derive("Debug").collect()
        assert not result.passed
        assert [(v.subject, str(v.file)) for v in result.violations] == [("Foo", "src/rule.rs")]
        assert result.violations[0].kind is ViolationKind.DERIVE

    def test_unconditioned_rule_covers_all_structs(self, arch: ArchRules) -> None:
        result = arch.structs().should().be_public().collect()
        assert result.expected == "All structs should be public"
        assert sorted(v.subject for v in result.violations) == ["Fixture", "Foo"]

    def test_filters_prune_test_namespace(self, arch: ArchRules) -> None:
        filtered = ArchRules(arch.index, Filters.cfg_test())
        result = filtered.structs().should().be_public().collect()
        assert [v.subject for v in result.violations] == ["Foo"]

    def test_only_have_private_fields(self, arch: ArchRules) -> None:
        rule = arch.structs().have_simple_name("Node").should().only_have_private_fields()
        result = rule.collect()
        assert result.violation_count == 1
        assert result.violations[0].kind is ViolationKind.ONLY_PRIVATE_FIELDS

    def test_reside_in_a_module(self, arch: ArchRules) -> None:
        rule = arch.structs().reside_in_a_module("app::ast").should().have_simple_name("Node")
        assert rule.is_valid()


class TestAssertionFold:
    """or_should()/and_should() combination."""

    def test_or_should_keeps_failing_side_violations(self, arch: ArchRules) -> None:
        result = arch.enums().should().be_private().or_should().be_public().collect()
        assert not result.passed
        assert [v.kind for v in result.violations] == [ViolationKind.BE_PRIVATE]
        assert result.expected == "All enums should be private or be public"

    def test_or_should_passes_when_both_hold(self, arch: ArchRules) -> None:
        rule = arch.enums().should().be_public().or_should().derive("Debug")
        assert rule.is_valid()

    def test_and_should_requires_both(self, arch: ArchRules) -> None:
        result = (
            arch.enums().should().be_public().and_should().implement_or_derive("Clone").collect()
        )
        assert not result.passed
        assert [v.kind for v in result.violations] == [ViolationKind.IMPLEMENT_OR_DERIVE]


class TestModuleRules:
    """End-to-end namespace rules."""

    def test_dependencies_matching_passes(self, arch: ArchRules) -> None:
        rule = (
            arch.modules()
            .have_simple_name("rule")
            .should()
            .only_have_dependencies_matching("crate::ast*")
        )
        assert rule.is_valid()

    def test_dependency_reported_once_across_ancestors(self, arch: ArchRules) -> None:
        result = arch.modules().should().only_have_dependencies_matching("crate::*").collect()
        assert [v.details["dependency"] for v in result.violations] == ["std::fmt"]

    def test_name_prefix_and_exclusion(self, arch: ArchRules) -> None:
        rule = (
            arch.modules()
            .have_simple_name_starting_with("as")
            .or_()
            .have_simple_name_ending_with("ule")
            .and_()
            .do_not_reside_in_a_module("app::rule")
            .should()
            .have_simple_name("ast")
        )
        assert rule.is_valid()


class TestBuilderOrder:
    """Out-of-order calls fail at the call that introduced them."""

    def test_leading_conjunction(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="and_\\(\\) must follow a condition"):
            arch.structs().and_()

    def test_adjacent_conditions(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="call and_\\(\\) or or_\\(\\) before"):
            arch.structs().have_simple_name("A").are_declared_public()

    def test_should_after_conjunction(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="dangling conjunction"):
            arch.structs().have_simple_name("A").or_().should()

    def test_adjacent_assertions(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="call and_should\\(\\) or or_should\\(\\)"):
            arch.structs().should().be_public().be_private()

    def test_leading_assertion_conjunction(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="or_should\\(\\) must follow an assertion"):
            arch.structs().should().or_should()

    def test_build_without_assertion(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="at least one assertion is required"):
            arch.structs().should().build()

    def test_build_with_dangling_assertion_conjunction(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="dangling conjunction"):
            arch.structs().should().be_public().and_should().build()

    def test_empty_condition_argument(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="name must not be empty") as exc_info:
            arch.structs().have_simple_name("")
        assert exc_info.value.rule_name == "structs rule"

    def test_empty_assertion_argument(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError, match="Invalid rule 'enums rule'"):
            arch.enums().should().derive("")

    def test_empty_module_pattern(self, arch: ArchRules) -> None:
        with pytest.raises(RuleValidationError):
            arch.modules().should().only_have_dependencies_matching("")


class TestExecution:
    """assert_check(), is_valid() and builder reuse."""

    def test_assert_check_raises_with_result(self, arch: ArchRules) -> None:
        with pytest.raises(ArchitectureViolationError) as exc_info:
            arch.structs().have_simple_name("Foo").should().be_public().assert_check()
        assert exc_info.value.result.violation_count == 1
        assert "Expected Structs that have simple name 'Foo' to be public" in str(exc_info.value)

    def test_assert_check_passes_silently(self, arch: ArchRules) -> None:
        arch.enums().should().be_public().assert_check()

    def test_builders_are_immutable(self, arch: ArchRules) -> None:
        base = arch.structs().have_simple_name("Foo")
        narrowed = base.and_().are_declared_private()
        assert not base.should().be_private().is_valid()
        assert narrowed.should().be_private().is_valid()

    def test_assertion_builder_reusable(self, arch: ArchRules) -> None:
        rule = arch.structs().should().be_public()
        assert rule.collect() == rule.collect()

    def test_built_rule_is_single_use(self, arch: ArchRules) -> None:
        rule = arch.structs().should().be_public().build()
        rule.evaluate()
        with pytest.raises(RuleValidationError, match="already evaluated"):
            rule.evaluate()

    def test_source_paths_relative(self, arch: ArchRules) -> None:
        result = arch.structs().have_simple_name("Foo").should().be_public().collect()
        assert result.violations[0].file == Path("src/lib.rs")
