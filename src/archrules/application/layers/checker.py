"""Layered architecture access checking.

For every protected layer, namespaces that are neither inside the layer
nor inside a permitted accessor layer form the forbidden territory. Each
import written directly in a forbidden namespace that starts with the
protected layer's prefix is one violation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archrules.application.rules.reports import ViolationFactory
from archrules.domain.model.assertion_result import AssertionResult
from archrules.domain.model.enums import DeclarationKind
from archrules.domain.model.filters import Filters

if TYPE_CHECKING:
    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.domain.model.layer import Layer, LayerAssertion, LayeredArchitecture
    from archrules.domain.model.violation import RuleViolation

logger = logging.getLogger(__name__)


class LayerChecker:
    """Evaluates a LayeredArchitecture against a declaration index.

    Example:
        arch = (
            LayeredArchitectureBuilder()
            .add_layer(Layer("Rule", "app::rule"))
            .add_layer(Layer("Ast", "app::ast"))
            .add_assertion("Rule", MayOnlyBeAccessedByLayer("Ast"))
            .build()
        )
        result = LayerChecker(index, arch).check()
    """

    def __init__(
        self,
        index: DeclarationIndex,
        architecture: LayeredArchitecture,
        filters: Filters | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            index: Declaration index
            architecture: Layers and access rules
            filters: Subtree exclusion filters (default: exclude nothing)
        """
        if index is None:
            raise TypeError("index must not be None")
        if architecture is None:
            raise TypeError("architecture must not be None")
        self._index = index
        self._architecture = architecture
        self._filters = filters if filters is not None else Filters.none()
        self._violations = ViolationFactory(index, DeclarationKind.MODULE)

    def check(self) -> AssertionResult:
        """Check every protected layer.

        Layers without an access rule are only used as accessor labels.

        Returns:
            Result whose violations are sorted by file and position
        """
        violations: list[RuleViolation] = []
        for layer, assertion in self._architecture.protected_layers():
            found = self._check_layer(layer, assertion)
            logger.debug(
                "layer '%s' (%s) %s: %d violations",
                layer.name,
                layer.prefix,
                assertion.describe(),
                len(found),
            )
            violations.extend(found)

        violations.sort(key=lambda v: v.sort_key())
        return AssertionResult(
            expected=self._architecture.describe(),
            violations=tuple(violations),
            passed=not violations,
        )

    def _check_layer(self, layer: Layer, assertion: LayerAssertion) -> list[RuleViolation]:
        permitted = tuple(
            self._architecture.get_layer(name).prefix for name in assertion.permitted()
        )
        root_name = self._index.root_name

        violations = []
        for module in self._index.flatten(self._filters).sorted():
            if module.path.reside_in(layer.prefix) or module.path.reside_in_any(permitted):
                continue
            for use in module.dependencies:
                if use.starts_with(layer.prefix, root_name):
                    violations.append(
                        self._violations.forbidden_access(
                            layer=layer.name,
                            layer_prefix=layer.prefix,
                            accessed_in=str(module.path),
                            use=use,
                            file=module.file,
                        )
                    )
        return violations
