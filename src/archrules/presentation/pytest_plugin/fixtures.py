"""pytest fixtures for architecture rules.

Provides session fixtures for architecture rules in tests.
User overrides arch_config or arch_parser in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from archrules.application.index.loader import load_index
from archrules.domain.model.configuration import IndexConfig
from archrules.domain.model.filters import Filters
from archrules.infrastructure.adapters.json_parser import JsonSourceParser
from archrules.presentation.api.dsl import ArchRules

if TYPE_CHECKING:
    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.domain.ports.source_parser import SourceParserPort


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(config: pytest.Config) -> Path:
    return Path(str(config.rootpath))


@pytest.fixture(scope="session")
def arch_config(request: pytest.FixtureRequest) -> IndexConfig:
    """Source layout configuration.

    Reads arch_source_dir and arch_root_name from pytest.ini.
    Defaults: arch_source_dir="src", arch_root_name=directory name.

    Returns:
        IndexConfig for the analyzed codebase

    Raises:
        FileNotFoundError: If the source directory does not exist
    """
    root_dir = _root_dir(request.config)
    source_path = root_dir / _get_ini_value(request.config, "arch_source_dir", "src")

    if not source_path.exists():
        raise FileNotFoundError(
            f"arch_source_dir '{source_path}' does not exist. "
            f"Configure arch_source_dir in pytest.ini or pyproject.toml."
        )

    root_name = _get_ini_value(request.config, "arch_root_name", root_dir.name)
    return IndexConfig(source_root=source_path, root_name=root_name, project_root=root_dir)


@pytest.fixture(scope="session")
def arch_parser(request: pytest.FixtureRequest) -> SourceParserPort:
    """Parser reading the JSON declaration dump named by arch_declarations.

    Returns:
        JsonSourceParser over the dump
    """
    root_dir = _root_dir(request.config)
    dump = root_dir / _get_ini_value(request.config, "arch_declarations", "declarations.json")
    return JsonSourceParser(dump, base_dir=root_dir)


@pytest.fixture(scope="session")
def arch_filters(request: pytest.FixtureRequest) -> Filters:
    """Subtree exclusion filters from arch_exclude_cfg (default: test)."""
    tags = request.config.getini("arch_exclude_cfg")
    return Filters(exclude_cfg=frozenset(tag for tag in tags if tag))


@pytest.fixture(scope="session")
def arch_index(arch_config: IndexConfig, arch_parser: SourceParserPort) -> DeclarationIndex:
    """Declaration index, built once per configuration and process.

    Returns:
        Cached DeclarationIndex
    """
    return load_index(arch_config, arch_parser)


@pytest.fixture(scope="session")
def arch(arch_index: DeclarationIndex, arch_filters: Filters) -> ArchRules:
    """Fluent DSL entry point for architecture rules.

    Returns:
        ArchRules over the session index
    """
    return ArchRules(arch_index, arch_filters)
