"""Layered architecture checking."""

from archrules.application.layers.checker import LayerChecker

__all__ = ["LayerChecker"]
