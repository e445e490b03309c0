"""Reporters for rule results."""

from archrules.application.reporters._base import BaseReporter
from archrules.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrules.application.reporters.plain_text import PlainTextReporter
from archrules.application.reporters.snippet import code_sample_region, label_span

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "ConsoleConfig",
    "code_sample_region",
    "label_span",
]
