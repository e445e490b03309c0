"""pytest plugin for archrules.

Provides fixtures for architecture rules:
    arch_config: Source layout configuration (override in conftest.py)
    arch_parser: Declaration source (override in conftest.py)
    arch_filters: Subtree exclusion filters
    arch_index: Cached declaration index
    arch: Fluent DSL entry point (ArchRules)

Configuration (pytest.ini or pyproject.toml):
    arch_source_dir: Directory holding the entry file (default: "src")
    arch_root_name: Root namespace name (default: directory name)
    arch_declarations: JSON declaration dump (default: "declarations.json")
    arch_exclude_cfg: cfg tags whose subtrees are skipped (default: test)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from archrules.presentation.pytest_plugin.fixtures import (
    arch,
    arch_config,
    arch_filters,
    arch_index,
    arch_parser,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "arch",
    "arch_config",
    "arch_filters",
    "arch_index",
    "arch_parser",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("arch_source_dir", "Directory holding the entry file", default="src")
    parser.addini("arch_root_name", "Root namespace name", default="")
    parser.addini(
        "arch_declarations", "JSON declaration dump", default="declarations.json"
    )
    parser.addini(
        "arch_exclude_cfg",
        "cfg tags whose namespace subtrees are skipped",
        type="linelist",
        default=["test"],
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "arch: mark test as architecture test",
    )
