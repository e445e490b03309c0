"""Layered architecture definition entities.

Provides immutable layer definitions with a Builder for construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Self

from archrules.domain.exceptions.validation import RuleValidationError, UndefinedLayerError


@dataclass(frozen=True, slots=True)
class Layer:
    """Named group of namespaces sharing a path prefix.

    Attributes:
        name: Layer name (must not be empty)
        prefix: Namespace path prefix, e.g. "app::rule"
    """

    name: str
    prefix: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("layer name must not be empty")
        if not self.prefix:
            raise ValueError(f"layer '{self.name}' must have a non-empty prefix")


@dataclass(frozen=True, slots=True)
class MayNotBeAccessedByAnyLayer:
    """No namespace outside the layer may import from it."""

    def permitted(self) -> tuple[str, ...]:
        """Names of layers allowed to access."""
        return ()

    def describe(self) -> str:
        """Natural-language description."""
        return "may not be accessed by any layer"


@dataclass(frozen=True, slots=True)
class MayOnlyBeAccessedByLayers:
    """Only the listed layers may import from the layer.

    Attributes:
        layers: Permitted accessor layer names (at least one)
    """

    layers: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.layers:
            raise ValueError("at least one permitted layer is required")

    def permitted(self) -> tuple[str, ...]:
        """Names of layers allowed to access."""
        return self.layers

    def describe(self) -> str:
        """Natural-language description."""
        names = ", ".join(f"'{name}'" for name in self.layers)
        return f"may only be accessed by layers {names}"


@dataclass(frozen=True, slots=True)
class MayOnlyBeAccessedByLayer:
    """Exactly one named layer may import from the layer.

    Attributes:
        layer: Permitted accessor layer name
    """

    layer: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.layer:
            raise ValueError("permitted layer must not be empty")

    def permitted(self) -> tuple[str, ...]:
        """Names of layers allowed to access."""
        return (self.layer,)

    def describe(self) -> str:
        """Natural-language description."""
        return f"may only be accessed by layer '{self.layer}'"


type LayerAssertion = (
    MayNotBeAccessedByAnyLayer | MayOnlyBeAccessedByLayers | MayOnlyBeAccessedByLayer
)


@dataclass(frozen=True, slots=True)
class LayeredArchitecture:
    """Layers plus the access rule attached to some of them.

    Layers without an assertion are passive labels: they can be named as
    permitted accessors but are not protected themselves.

    Attributes:
        layers: Layer name -> Layer, in definition order
        assertions: Protected layer name -> its access rule
    """

    layers: Mapping[str, Layer] = field(default_factory=dict)
    assertions: Mapping[str, LayerAssertion] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name, assertion in self.assertions.items():
            if name not in self.layers:
                raise UndefinedLayerError(name, "where_layer")
            for permitted in assertion.permitted():
                if permitted not in self.layers:
                    raise UndefinedLayerError(permitted, f"access rule of layer '{name}'")

    def get_layer(self, name: str) -> Layer:
        """Get layer by name.

        Raises:
            UndefinedLayerError: If no such layer is defined
        """
        layer = self.layers.get(name)
        if layer is None:
            raise UndefinedLayerError(name, "get_layer")
        return layer

    def protected_layers(self) -> tuple[tuple[Layer, LayerAssertion], ...]:
        """Layers carrying an assertion, in layer definition order."""
        return tuple(
            (layer, self.assertions[name])
            for name, layer in self.layers.items()
            if name in self.assertions
        )

    def describe(self) -> str:
        """Natural-language description of every access rule."""
        parts = [
            f"layer '{layer.name}' ({layer.prefix}) {assertion.describe()}"
            for layer, assertion in self.protected_layers()
        ]
        return "; ".join(parts) if parts else "no layer access rules"


class LayeredArchitectureBuilder:
    """Builder for LayeredArchitecture.

    FAIL-FIRST: undefined layer names are rejected when the assertion is
    added, not when the architecture is checked.

    Example:
        arch = (
            LayeredArchitectureBuilder()
            .add_layer(Layer("Rule", "app::rule"))
            .add_layer(Layer("Ast", "app::ast"))
            .add_assertion("Rule", MayOnlyBeAccessedByLayer("Ast"))
            .build()
        )
    """

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._layers: dict[str, Layer] = {}
        self._assertions: dict[str, LayerAssertion] = {}

    def has_layer(self, name: str) -> bool:
        """True if a layer with this name was added."""
        return name in self._layers

    def add_layer(self, layer: Layer) -> Self:
        """Add layer definition.

        Args:
            layer: Layer to add

        Returns:
            Self for chaining

        Raises:
            RuleValidationError: If a layer with the same name exists
        """
        if layer.name in self._layers:
            raise RuleValidationError(
                "layered_architecture", f"layer '{layer.name}' already defined"
            )
        self._layers[layer.name] = layer
        return self

    def add_assertion(self, layer_name: str, assertion: LayerAssertion) -> Self:
        """Attach access rule to a defined layer.

        Args:
            layer_name: Protected layer
            assertion: Access rule

        Returns:
            Self for chaining

        Raises:
            UndefinedLayerError: If layer_name or a permitted layer is undefined
            RuleValidationError: If the layer already has an access rule
        """
        if layer_name not in self._layers:
            raise UndefinedLayerError(layer_name, "where_layer")
        for permitted in assertion.permitted():
            if permitted not in self._layers:
                raise UndefinedLayerError(permitted, f"access rule of layer '{layer_name}'")
        if layer_name in self._assertions:
            raise RuleValidationError(
                "layered_architecture", f"layer '{layer_name}' already has an access rule"
            )
        self._assertions[layer_name] = assertion
        return self

    def build(self) -> LayeredArchitecture:
        """Build immutable LayeredArchitecture."""
        return LayeredArchitecture(layers=dict(self._layers), assertions=dict(self._assertions))
