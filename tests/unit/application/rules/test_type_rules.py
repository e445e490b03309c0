"""Tests for application/rules/type_rules.py."""

from pathlib import Path

from archrules.application.rules import EnumRule, StructRule
from archrules.application.rules import assertions as a
from archrules.application.rules import conditions as c
from archrules.domain.model.enums import ViolationKind, Visibility
from tests.factories import (
    make_enum,
    make_field,
    make_impl,
    make_index,
    make_mod,
    make_parsed,
    make_struct,
)


def build_index():
    """Structs and enums with assorted derives, impls and fields.

    Layout:
        app            struct Derived(Debug), struct Manual, struct Neither
                       impl fmt::Debug for Manual
        app::model     struct Point { pub x, y }, struct Pair(pub u32, u32), struct Unit
                       enum Color(Clone), enum Shape
                       impl Clone for Shape
    """
    return make_index(
        {
            "lib.rs": make_parsed(
                structs=(
                    make_struct("Derived", derives=("Debug",), line=1),
                    make_struct("Manual", line=2),
                    make_struct("Neither", Visibility.CRATE, line=3),
                ),
                impls=(make_impl("Manual", "std::fmt::Debug"),),
                modules=(make_mod("model", line=5),),
            ),
            "model.rs": make_parsed(
                structs=(
                    make_struct(
                        "Point",
                        fields=(
                            make_field(0, "x", Visibility.PUBLIC, line=2),
                            make_field(1, "y", line=3),
                        ),
                        line=1,
                    ),
                    make_struct(
                        "Pair",
                        fields=(
                            make_field(0, None, Visibility.PUBLIC, line=5),
                            make_field(1, None, line=5),
                        ),
                        line=5,
                    ),
                    make_struct("Unit", line=7),
                ),
                enums=(
                    make_enum("Color", derives=("Clone",), line=9),
                    make_enum("Shape", Visibility.INHERITED, line=10),
                ),
                impls=(make_impl("Shape", "Clone"),),
            ),
        }
    )


class TestStructTraitAssertions:
    """Tests for derive / implement / implement_or_derive."""

    def test_derive(self) -> None:
        result = StructRule(
            build_index(), [c.ResideInAModule("app")], [a.Derive("Debug")]
        ).evaluate()
        assert [v.subject for v in result.violations] == ["Manual", "Neither"]
        assert result.violations[0].details["trait"] == "Debug"

    def test_implement_by_substring_of_trait_path(self) -> None:
        result = StructRule(
            build_index(), [c.ResideInAModule("app")], [a.Implement("Debug")]
        ).evaluate()
        assert [v.subject for v in result.violations] == ["Derived", "Neither"]

    def test_implement_or_derive_is_intersection(self) -> None:
        result = StructRule(
            build_index(), [c.ResideInAModule("app")], [a.ImplementOrDerive("Debug")]
        ).evaluate()
        assert [v.subject for v in result.violations] == ["Neither"]
        violation = result.violations[0]
        assert violation.kind is ViolationKind.IMPLEMENT_OR_DERIVE
        assert violation.message == "Struct 'Neither' should implement or derive 'Debug'"

    def test_implement_condition(self) -> None:
        result = StructRule(
            build_index(), [c.Implement("Debug")], [a.HaveSimpleName("Manual")]
        ).evaluate()
        assert result.passed

    def test_derive_condition(self) -> None:
        result = StructRule(
            build_index(), [c.Derive("Debug")], [a.HaveSimpleName("Derived")]
        ).evaluate()
        assert result.passed


class TestStructFieldAssertions:
    """Tests for only_have_private_fields / only_have_public_fields."""

    def test_one_violation_per_public_field(self) -> None:
        result = StructRule(
            build_index(), [c.ResideInAModule("app::model")], [a.OnlyHavePrivateFields()]
        ).evaluate()
        assert [(v.subject, v.details["field"]) for v in result.violations] == [
            ("Pair", "0"),
            ("Point", "x"),
        ]
        assert result.violations[1].span.start.line == 2

    def test_one_violation_per_private_field(self) -> None:
        result = StructRule(
            build_index(), [c.ResideInAModule("app::model")], [a.OnlyHavePublicFields()]
        ).evaluate()
        assert [(v.subject, v.details["field"]) for v in result.violations] == [
            ("Pair", "1"),
            ("Point", "y"),
        ]
        assert result.violations[1].suggestion == "Try changing field visibility to `pub y`"

    def test_zero_field_struct_never_violates(self) -> None:
        rule = StructRule(build_index(), [c.HaveSimpleName("Unit")], [a.OnlyHavePublicFields()])
        assert rule.evaluate().passed


class TestStructVisibilityAndNames:
    """Tests for be_public / be_private / have_simple_name reports."""

    def test_be_public_report(self) -> None:
        result = StructRule(build_index(), [c.AreDeclaredPrivate()], [a.BePublic()]).evaluate()
        violation = result.violations[0]
        assert violation.kind is ViolationKind.BE_PUBLIC
        assert violation.message == "Struct 'Neither' should be public"
        assert violation.file == Path("src/lib.rs")
        assert violation.span.start.line == 3
        assert violation.details["visibility"] == "crate"

    def test_have_name_matching_condition(self) -> None:
        result = StructRule(
            build_index(), [c.HaveNameMatching("P*")], [a.BePrivate()]
        ).evaluate()
        assert [v.subject for v in result.violations] == ["Pair", "Point"]
        assert result.violations[0].file == Path("src/model.rs")

    def test_have_simple_name_report(self) -> None:
        result = StructRule(
            build_index(), [c.HaveSimpleName("Unit")], [a.HaveSimpleName("Empty")]
        ).evaluate()
        assert result.violations[0].message == "Struct 'Unit' name should match pattern 'Empty'"


class TestEnumRule:
    """Tests for EnumRule."""

    def test_all_enums_should_be_public(self) -> None:
        result = EnumRule(build_index(), [], [a.BePublic()]).evaluate()
        assert result.expected == "All enums should be public"
        assert [v.message for v in result.violations] == ["Enum 'Shape' should be public"]

    def test_implement_or_derive(self) -> None:
        result = EnumRule(build_index(), [], [a.ImplementOrDerive("Clone")]).evaluate()
        assert result.passed

    def test_derive(self) -> None:
        result = EnumRule(build_index(), [], [a.Derive("Clone")]).evaluate()
        assert [v.subject for v in result.violations] == ["Shape"]

    def test_implement_condition(self) -> None:
        result = EnumRule(build_index(), [c.Implement("Clone")], [a.BePublic()]).evaluate()
        assert result.expected == "Enums that implement Clone to be public"
        assert [v.subject for v in result.violations] == ["Shape"]
