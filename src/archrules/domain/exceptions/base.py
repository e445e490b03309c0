"""Base exceptions for archrules domain."""


class ArchRulesError(Exception):
    """Root exception for all archrules errors.

    All domain exceptions inherit from this.
    Allows catching all archrules-specific errors.
    """
