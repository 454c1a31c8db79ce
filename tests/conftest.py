"""Shared test fixtures for swagcli.

Provides the Swagger 2 fixture document, an isolated configuration
environment and output-state reset between tests.  These fixtures are
discovered by pytest and available to all test modules without imports.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from swagcli.models import API
from swagcli.output import OutputFormat, OutputManager, reset_output, set_output

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CYBERRISK_BASE = "https://cyber-risk.example.com/api/public"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The CLI callback installs a manager built from its flags; without a
    reset, ``--json`` or ``--quiet`` would leak into later tests.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cyberrisk_raw() -> dict[str, Any]:
    """Load the raw CyberRisk Swagger 2 document (``$ref`` pointers intact)."""
    with open(FIXTURES_DIR / "cyberrisk_swagger.json") as f:
        return json.load(f)


@pytest.fixture
def cyberrisk_api(cyberrisk_raw: dict[str, Any]) -> API:
    """The CyberRisk document compiled against :data:`CYBERRISK_BASE`."""
    from swagcli.loader import new

    loader = new()
    return loader.load(
        CYBERRISK_BASE,
        "https://cyber-risk.example.com/api/swagger.json",
        json.dumps(cyberrisk_raw),
    )


@pytest.fixture
def minimal_doc() -> dict[str, Any]:
    """Return a factory-friendly minimal Swagger 2 document."""
    return copy.deepcopy(
        {
            "swagger": "2.0",
            "info": {"title": "Minimal", "version": "1.0"},
            "paths": {},
        }
    )


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temp dir and clear SWAGCLI_* env vars.

    Returns:
        The config directory (not yet created).
    """
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SWAGCLI_CONFIG_DIR", str(config_dir))
    for var in ["SWAGCLI_NO_PAGINATE", "SWAGCLI_BASE_PATH"]:
        monkeypatch.delenv(var, raising=False)
    return config_dir


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format, colourless OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
