"""Tests for swagcli.links (page-token pagination)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from swagcli.links import (
    NEXT_REL,
    PageTokenLinkParser,
    new_link_parser,
    next_query,
    unwrap_collection,
)
from swagcli.models import Link, Response, Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _parse(url: str, body: Any, settings: Settings | None = None) -> Response:
    response = Response(body=body)
    PageTokenLinkParser(settings).parse_links(url, response)
    return response


class TestNextQuery:
    def test_prepends_token(self) -> None:
        assert next_query("foo=bar", "10") == "page_token=10&foo=bar"

    def test_replaces_existing_token(self) -> None:
        assert next_query("page_token=10&foo=bar", "20") == "page_token=20&foo=bar"

    def test_replaces_token_in_middle(self) -> None:
        assert next_query("foo=bar&page_token=10&x=y", "20") == "foo=bar&page_token=20&x=y"

    def test_empty_query(self) -> None:
        assert next_query("", "5") == "page_token=5"

    def test_next_page_token_param_not_rewritten(self) -> None:
        assert next_query("next_page_token=3", "5") == "page_token=5&next_page_token=3"


class TestUnwrapCollection:
    def test_first_list_in_key_order(self) -> None:
        assert unwrap_collection({"total_results": 2, "zeta": [1], "alpha": [2]}) == [2]

    def test_no_list_returns_body(self) -> None:
        body = {"total_results": 0, "next_page_token": ""}
        assert unwrap_collection(body) is body


class TestPageTokenLinkParser:
    def test_next_link_and_unwrap(self) -> None:
        body = {"total_results": 30, "next_page_token": "10", "items": [1, 2, 3]}
        response = _parse("https://api.example.com/items?foo=bar", body)
        assert response.links[NEXT_REL] == [Link(rel="next", uri="?page_token=10&foo=bar")]
        assert response.body == [1, 2, 3]

    def test_follow_up_page(self) -> None:
        body = {"total_results": 30, "next_page_token": "20", "items": [4, 5, 6]}
        response = _parse("https://api.example.com/items?page_token=10&foo=bar", body)
        assert response.links[NEXT_REL][0].uri == "?page_token=20&foo=bar"

    def test_request_without_query(self) -> None:
        body = {"total_results": 3, "next_page_token": "2", "items": []}
        response = _parse(httpx.URL("https://api.example.com/items"), body)
        assert response.links[NEXT_REL][0].uri == "?page_token=2"

    def test_numeric_token(self) -> None:
        body = {"total_results": 30, "next_page_token": 20, "items": []}
        response = _parse("https://api.example.com/items", body)
        assert response.links[NEXT_REL][0].uri == "?page_token=20"

    def test_last_page_has_no_link(self) -> None:
        body = {"total_results": 30, "next_page_token": "", "items": [7]}
        response = _parse("https://api.example.com/items", body)
        assert response.links == {}
        assert response.body == [7]

    def test_null_token_has_no_link(self) -> None:
        response = _parse("https://api.example.com/items", {"total_results": 1, "next_page_token": None, "a": [1]})
        assert response.links == {}
        assert response.body == [1]

    @pytest.mark.parametrize(
        "body",
        [
            [1, 2, 3],
            "text",
            {"items": [1, 2]},
            {"total_results": None, "items": [1, 2]},
        ],
    )
    def test_non_paginated_bodies_untouched(self, body: Any) -> None:
        response = _parse("https://api.example.com/items?foo=bar", body)
        assert response.body == body
        assert response.links == {}

    def test_disabled_by_settings(self) -> None:
        body = {"total_results": 30, "next_page_token": "10", "items": [1]}
        response = _parse("https://api.example.com/items", body, Settings(paginate=False))
        assert response.body == body
        assert response.links == {}

    def test_existing_links_kept(self) -> None:
        response = Response(
            body={"total_results": 3, "next_page_token": "2", "items": []},
            links={NEXT_REL: [Link(rel="next", uri="/from-header")]},
        )
        new_link_parser().parse_links("https://api.example.com/items", response)
        assert [link.uri for link in response.links[NEXT_REL]] == ["/from-header", "?page_token=2"]

    def test_domains_fixture(self) -> None:
        body = json.loads((FIXTURES_DIR / "domains_page.json").read_text())
        response = _parse("https://cyber-risk.example.com/api/public/domains?page_size=2", body)
        assert response.links[NEXT_REL][0].uri == "?page_token=2&page_size=2"
        assert [d["hostname"] for d in response.body] == ["example.com", "example.org"]
