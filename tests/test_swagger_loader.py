"""Tests for swagcli.loader (the host-facing Swagger 2 loader)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from swagcli.exceptions import ReferenceResolutionError, SpecParseError, UnsupportedDocumentError
from swagcli.loader import LOCATION_HINTS, SwaggerLoader, new
from swagcli.models import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestSwaggerLoader:
    def test_new_returns_loader(self) -> None:
        assert isinstance(new(), SwaggerLoader)

    def test_location_hints(self) -> None:
        loader = new()
        assert loader.location_hints() == LOCATION_HINTS
        assert loader.location_hints() is not LOCATION_HINTS

    def test_detect(self, cyberrisk_raw: dict[str, Any]) -> None:
        loader = new()
        assert loader.detect(json.dumps(cyberrisk_raw)) is True
        assert loader.detect((FIXTURES_DIR / "openapi3.yaml").read_text()) is False

    def test_base_requires_load(self) -> None:
        with pytest.raises(ReferenceResolutionError, match="load"):
            new().get_base()

    def test_load_yaml(self, cyberrisk_raw: dict[str, Any]) -> None:
        content = yaml.safe_dump(cyberrisk_raw)
        api = new().load(
            "https://cyber-risk.example.com/api/public",
            "https://cyber-risk.example.com/api/swagger.yaml",
            content,
        )
        assert api.operations[0].name == "list-domains"

    def test_base_path_setting(self, cyberrisk_raw: dict[str, Any]) -> None:
        loader = new(Settings(base_path="/v2"))
        api = loader.load("https://cyber-risk.example.com/api/public", "swagger.json", json.dumps(cyberrisk_raw))
        assert api.operations[0].uri_template == "https://cyber-risk.example.com/v2/domains"

    def test_resolve_after_load(self, minimal_doc: dict[str, Any]) -> None:
        loader = new()
        loader.load("https://api.example.com/base/", "swagger.json", json.dumps(minimal_doc))
        assert str(loader.get_base()) == "https://api.example.com/base/"
        assert str(loader.resolve("items")) == "https://api.example.com/base/items"

    def test_invalid_content(self) -> None:
        with pytest.raises(SpecParseError):
            new().load("https://api.example.com", "swagger.json", "swagger: '2.0'")

    def test_openapi3_rejected(self) -> None:
        content = (FIXTURES_DIR / "openapi3.yaml").read_text()
        with pytest.raises(UnsupportedDocumentError):
            new().load("https://api.example.com", "openapi.yaml", content)
