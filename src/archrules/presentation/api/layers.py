"""Fluent API for layered architectures.

Example:
    (
        ArchitectureQuery(index)
        .layer("Rule").defined_by("app::rule")
        .layer("Ast").defined_by("app::ast")
        .where_layer("Rule").may_only_be_accessed_by_layer("Ast")
        .assert_check()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from archrules.application.layers.checker import LayerChecker
from archrules.domain.exceptions.validation import RuleValidationError, UndefinedLayerError
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.layer import (
    Layer,
    LayeredArchitectureBuilder,
    MayNotBeAccessedByAnyLayer,
    MayOnlyBeAccessedByLayer,
    MayOnlyBeAccessedByLayers,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.domain.model.assertion_result import AssertionResult
    from archrules.domain.model.filters import Filters
    from archrules.domain.model.layer import LayerAssertion

_RULE_NAME = "layered_architecture"


def _build[T](kind: Callable[..., T], *args: Any) -> T:
    """Construct a layer value, reporting bad arguments as rule misuse."""
    try:
        return kind(*args)
    except ValueError as e:
        raise RuleValidationError(_RULE_NAME, str(e)) from e


class ArchitectureQuery:
    """Collects layers and access rules, then checks them.

    Undefined layer names are rejected by the call that mentions them.
    """

    def __init__(self, index: DeclarationIndex, filters: Filters | None = None) -> None:
        """Initialize empty architecture.

        Args:
            index: Declaration index to check against
            filters: Subtree exclusion filters (default: exclude nothing)

        Raises:
            TypeError: If index is None
        """
        if index is None:
            raise TypeError("index must not be None")
        self._index = index
        self._filters = filters
        self._builder = LayeredArchitectureBuilder()

    def layer(self, name: str) -> LayerDefinition:
        """Name a new layer; complete it with defined_by().

        Args:
            name: Layer name

        Returns:
            Pending layer definition
        """
        return LayerDefinition(self, name)

    def where_layer(self, name: str) -> LayerAccess:
        """Pick the layer an access rule is about.

        Args:
            name: Previously defined layer

        Returns:
            Pending access rule

        Raises:
            RuleValidationError: If name is empty
            UndefinedLayerError: If the layer was not defined
        """
        if not name:
            raise RuleValidationError(_RULE_NAME, "layer name must not be empty")
        if not self._builder.has_layer(name):
            raise UndefinedLayerError(name, "where_layer")
        return LayerAccess(self, name)

    def _add_layer(self, layer: Layer) -> ArchitectureQuery:
        self._builder.add_layer(layer)
        return self

    def _add_assertion(self, name: str, assertion: LayerAssertion) -> ArchitectureQuery:
        self._builder.add_assertion(name, assertion)
        return self

    def check(self) -> AssertionResult:
        """Evaluate every access rule.

        Returns:
            Result with one violation per forbidden import
        """
        return LayerChecker(self._index, self._builder.build(), self._filters).check()

    def assert_check(self) -> None:
        """Evaluate and raise on failure.

        Raises:
            ArchitectureViolationError: If any forbidden import exists
        """
        result = self.check()
        if not result.passed:
            raise ArchitectureViolationError(result)

    def is_valid(self) -> bool:
        """True if no forbidden import exists."""
        return self.check().passed


class LayerDefinition:
    """Layer named but not yet bound to a namespace prefix."""

    __slots__ = ("_name", "_query")

    def __init__(self, query: ArchitectureQuery, name: str) -> None:
        self._query = query
        self._name = name

    def defined_by(self, prefix: str) -> ArchitectureQuery:
        """Bind the layer to every namespace whose path starts with prefix.

        Args:
            prefix: Namespace path prefix, e.g. "app::rule"

        Returns:
            Architecture for further chaining

        Raises:
            RuleValidationError: If name or prefix is empty, or the layer
                name is already taken
        """
        return self._query._add_layer(_build(Layer, self._name, prefix))


class LayerAccess:
    """Access rule pending for one layer."""

    __slots__ = ("_name", "_query")

    def __init__(self, query: ArchitectureQuery, name: str) -> None:
        self._query = query
        self._name = name

    def may_not_be_accessed_by_any_layer(self) -> ArchitectureQuery:
        """Forbid imports of the layer from anywhere outside it."""
        return self._query._add_assertion(self._name, MayNotBeAccessedByAnyLayer())

    def may_only_be_accessed_by_layers(self, *names: str) -> ArchitectureQuery:
        """Allow imports of the layer only from the named layers.

        Args:
            *names: Permitted accessor layers (at least one required)

        Returns:
            Architecture for further chaining

        Raises:
            RuleValidationError: If no names provided
            UndefinedLayerError: If a named layer was not defined
        """
        return self._query._add_assertion(self._name, _build(MayOnlyBeAccessedByLayers, names))

    def may_only_be_accessed_by_layer(self, name: str) -> ArchitectureQuery:
        """Allow imports of the layer only from one named layer.

        Raises:
            UndefinedLayerError: If the named layer was not defined
        """
        return self._query._add_assertion(self._name, _build(MayOnlyBeAccessedByLayer, name))


def layered_architecture(
    index: DeclarationIndex, filters: Filters | None = None
) -> ArchitectureQuery:
    """Start layered architecture definition.

    Args:
        index: Declaration index to check against
        filters: Subtree exclusion filters

    Returns:
        Empty ArchitectureQuery
    """
    return ArchitectureQuery(index, filters)
