"""Tests for swagcli.compiler.description."""

from __future__ import annotations

from swagcli.compiler.description import (
    compose_description,
    group_responses,
    param_schema_text,
    response_key,
)
from swagcli.compiler.params import ClassifiedParams, classify_parameters
from swagcli.models import Param, ParameterLocation

JSON = "application/json"

ERROR_SCHEMA = {"type": "object", "properties": {"error": {"type": "string"}}}


class TestResponseKey:
    def test_no_schema_keyed_by_code(self) -> None:
        assert response_key("204", JSON, "") == "code:204"

    def test_schema_keyed_by_digest(self) -> None:
        key = response_key("200", JSON, "(string)")
        assert key.startswith("sha256:")
        assert key == response_key("201", JSON, "(string)")

    def test_content_type_is_part_of_key(self) -> None:
        assert response_key("200", JSON, "(string)") != response_key("200", "text/plain", "(string)")


class TestGroupResponses:
    def test_distinct_schemas_are_separate(self) -> None:
        responses = {
            "200": {"description": "OK", "schema": {"type": "string"}},
            "404": {"description": "Not found", "schema": ERROR_SCHEMA},
        }
        groups = group_responses(responses, JSON)
        assert [g.codes for g in groups] == [["200"], ["404"]]
        assert groups[0].description == "OK"
        assert groups[1].description == "Not found"

    def test_identical_schemas_share_a_group(self) -> None:
        responses = {
            "201": {"description": "Created", "schema": ERROR_SCHEMA},
            "200": {"description": "OK", "schema": ERROR_SCHEMA},
        }
        groups = group_responses(responses, JSON)
        assert len(groups) == 1
        assert groups[0].codes == ["200", "201"]
        assert groups[0].content_type == JSON
        assert groups[0].description == ""

    def test_bodyless_responses_never_merge(self) -> None:
        responses = {
            "204": {"description": "Deleted"},
            "404": {"description": "Missing"},
        }
        groups = group_responses(responses, JSON)
        assert [g.codes for g in groups] == [["204"], ["404"]]
        assert [g.key for g in groups] == ["code:204", "code:404"]
        assert all(not g.has_schema for g in groups)
        assert all(g.content_type == "" for g in groups)

    def test_integer_codes_and_default(self) -> None:
        responses = {200: {"description": "OK"}, "default": {"description": "Error"}}
        groups = group_responses(responses, JSON)
        assert [g.codes for g in groups] == [["200"], ["default"]]

    def test_headers_sorted(self) -> None:
        responses = {"200": {"description": "OK", "headers": {"X-B": {}, "ETag": {}}}}
        assert group_responses(responses, JSON)[0].header_names == ["ETag", "X-B"]

    def test_description_override(self) -> None:
        responses = {"200": {"description": "OK", "x-cli-description": "The user"}}
        assert group_responses(responses, JSON)[0].description == "The user"

    def test_non_mapping_response_skipped(self) -> None:
        assert group_responses({"200": "OK"}, JSON) == []


class TestParamSchemaText:
    def test_inline_schema_gets_description(self) -> None:
        param = Param(name="id", location=ParameterLocation.PATH, description="User ID")
        assert param_schema_text(param, {"type": "string"}) == "(string) User ID"

    def test_schema_description_kept(self) -> None:
        param = Param(name="id", location=ParameterLocation.PATH, description="Param text")
        text = param_schema_text(param, {"type": "string", "description": "Schema text"})
        assert text == "(string) Schema text"

    def test_without_schema(self) -> None:
        param = Param(name="id", location=ParameterLocation.PATH, description="User ID")
        assert param_schema_text(param, None) == "(string): User ID"


class TestComposeDescription:
    def test_full_layout(self) -> None:
        op = {
            "parameters": [
                {"name": "id", "in": "path", "type": "string", "description": "User ID"},
                {"name": "verbose", "in": "query", "type": "boolean"},
            ],
        }
        params = classify_parameters(op, {})
        groups = group_responses({"200": {"description": "OK", "schema": {"type": "string"}}}, JSON)

        assert compose_description("Get a user", params, groups) == (
            "Get a user\n"
            "## Argument Schema:\n"
            "```schema\n{\n  id: (string) User ID\n}\n```\n"
            "\n## Option Schema:\n"
            "```schema\n{\n  --verbose: (boolean)\n}\n```\n"
            "\n## Response 200 (application/json)\n"
            "\nOK\n"
            "\n```schema\n(string)\n```\n"
        )

    def test_bodyless_response(self) -> None:
        groups = group_responses({"204": {"description": ""}}, JSON)
        assert compose_description("", ClassifiedParams(), groups) == "## Response 204\n\nResponse has no body\n"

    def test_distinct_schemas_render_in_code_order(self) -> None:
        groups = group_responses(
            {
                "404": {"description": "Not found", "schema": ERROR_SCHEMA},
                "200": {"description": "OK", "schema": {"type": "string"}},
            },
            JSON,
        )
        text = compose_description("", ClassifiedParams(), groups)
        assert text.count("## Response ") == 2
        assert "## Responses" not in text
        assert text.index("## Response 200 (application/json)") < text.index("## Response 404 (application/json)")

    def test_grouped_section(self) -> None:
        groups = group_responses(
            {
                "422": {"description": "Bad", "schema": ERROR_SCHEMA},
                "500": {"description": "Boom", "schema": ERROR_SCHEMA},
            },
            JSON,
        )
        text = compose_description("Base", ClassifiedParams(), groups)
        assert "## Responses 422/500 (application/json)\n" in text
        assert "Bad" not in text

    def test_headers_line(self) -> None:
        groups = group_responses(
            {"200": {"description": "OK", "headers": {"ETag": {}}, "schema": {"type": "string"}}}, JSON
        )
        text = compose_description("", ClassifiedParams(), groups)
        assert "\nHeaders: ETag\n" in text

    def test_header_params_follow_query_params(self) -> None:
        op = {
            "parameters": [
                {"name": "X-Trace", "in": "header", "type": "string"},
                {"name": "limit", "in": "query", "type": "integer"},
            ]
        }
        text = compose_description("", classify_parameters(op, {}), [])
        assert text.index("--limit") < text.index("--x-trace")

    def test_ends_with_single_newline(self) -> None:
        assert compose_description("Trailing\n\n\n", ClassifiedParams(), []) == "Trailing\n"
