"""Rule validation exceptions."""

from archrules.domain.exceptions.base import ArchRulesError


class RuleValidationError(ArchRulesError):
    """Error in rule definition.

    Raised when a rule is authored incorrectly: builder calls out of
    order, empty arguments, or a rule evaluated twice.
    FAIL-FIRST: raised at the call that introduced the mistake.

    Attributes:
        rule_name: Name of invalid rule (must not be empty)
        reason: Why rule is invalid (must not be empty)
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not rule_name:
            raise ValueError("rule_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Invalid rule '{rule_name}': {reason}")


class UndefinedLayerError(RuleValidationError):
    """Layer rule references a layer that was never defined.

    Attributes:
        layer: The undefined layer name
        context: Builder call that referenced it
    """

    def __init__(self, layer: str, context: str) -> None:
        if not layer:
            raise ValueError("layer must not be empty")

        self.layer = layer
        self.context = context
        reason = f"Undefined layer: '{layer}'"
        if context:
            reason = f"{reason} in {context}"
        super().__init__("layered_architecture", reason)
