"""Core test fixtures for the daxis project."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import yaml
from typer.testing import CliRunner

from daxis.axis import DynamicAxis
from daxis.core.errors import EnvironmentUnavailableError
from daxis.protocols import EnvironmentProviderProtocol


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def axis() -> DynamicAxis:
    """Dynamic axis bound to variable V."""
    return DynamicAxis("AXIS", "V")


@pytest.fixture
def failing_environment() -> Mock:
    """Environment provider that cannot produce a snapshot."""
    provider = Mock(spec=EnvironmentProviderProtocol)
    provider.get_environment.side_effect = EnvironmentUnavailableError(
        "build environment not available"
    )
    return provider


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove daxis settings and test variables from the process environment."""
    for name in (
        "AXIS_VALUES",
        "DAXIS_LOG_LEVEL",
        "DAXIS_LOG_FILE",
        "DAXIS_JSON_LOGS",
        "DAXIS_INHERIT_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def write_matrix_yaml(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a matrix definition to a temporary YAML file."""

    def _write(config: Any, name: str = "matrix.yaml") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(config, f)
        return path

    return _write


@pytest.fixture
def sample_matrix_config() -> dict[str, Any]:
    """Matrix with one dynamic and one text axis."""
    return {
        "axes": [
            {"name": "AXIS", "type": "dynamic", "var-name": "AXIS_VALUES"},
            {"name": "OS", "type": "text", "values": ["linux", "macos"]},
        ]
    }
