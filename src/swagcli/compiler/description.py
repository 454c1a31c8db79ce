"""Compose the long, markdown help text of a compiled operation.

The text is built from up to four parts, in order:

1. The operation description (or its ``x-cli-description`` override).
2. ``## Argument Schema:`` -- one line per path parameter.
3. ``## Option Schema:`` -- query parameters, then header parameters, each
   written as a ``--flag``.
4. One section per :class:`~swagcli.models.ResponseGroup`.  Status codes
   whose responses carry the same content type and the same rendered schema
   share a section (``## Responses 200/201 (application/json)``).

Grouping keys are SHA-256 digests of the content type plus the rendered
schema.  A response without a schema is keyed by its own status code, so
body-less responses are never folded together.
"""

from __future__ import annotations

import hashlib
from typing import Any, Optional

from swagcli.compiler.params import ClassifiedParams
from swagcli.compiler.schema import MODE_READ, MODE_WRITE, render_schema
from swagcli.extensions import EXT_DESCRIPTION, get_ext
from swagcli.models import Param, ResponseGroup


def param_schema_text(param: Param, schema: Optional[dict[str, Any]]) -> str:
    """Return the schema line for *param*, falling back to its type info."""
    if schema:
        if param.description and not schema.get("description"):
            schema = {**schema, "description": param.description}
        return render_schema(schema, "  ", MODE_WRITE)
    return f"({param.type}): {param.description}"


def response_key(code: str, content_type: str, schema_text: str) -> str:
    """Return the equality key used to group a response."""
    if not schema_text:
        return f"code:{code}"
    digest = hashlib.sha256(f"{content_type}\n{schema_text}".encode("utf-8"))
    return "sha256:" + digest.hexdigest()


def group_responses(responses: dict[Any, Any], content_type: str) -> list[ResponseGroup]:
    """Group an operation's responses by content equivalence.

    Args:
        responses: The operation's ``responses`` map, keyed by status code.
        content_type: The media type the operation produces.

    Returns:
        Groups ordered by their first status code; codes within a group are
        ascending (string order, so ``default`` sorts after numeric codes).
    """
    if not isinstance(responses, dict):
        return []
    by_code = {str(code): resp for code, resp in responses.items()}
    groups: dict[str, ResponseGroup] = {}
    first_response: dict[str, dict[str, Any]] = {}

    for code in sorted(by_code):
        resp = by_code[code]
        if not isinstance(resp, dict):
            continue

        schema = resp.get("schema")
        schema_text = render_schema(schema, "", MODE_READ) if isinstance(schema, dict) else ""
        key = response_key(code, content_type, schema_text)

        group = groups.get(key)
        if group is None:
            group = ResponseGroup(
                key=key,
                content_type=content_type if schema_text else "",
                schema_text=schema_text,
                header_names=sorted(_header_names(resp)),
            )
            groups[key] = group
            first_response[key] = resp
        group.codes.append(code)

    for key, group in groups.items():
        if len(group.codes) == 1:
            resp = first_response[key]
            group.description = get_ext(resp, EXT_DESCRIPTION, str(resp.get("description") or ""))

    return list(groups.values())


def _header_names(resp: dict[str, Any]) -> list[str]:
    headers = resp.get("headers")
    return [str(name) for name in headers] if isinstance(headers, dict) else []


def _schema_block(lines: list[str]) -> str:
    return "```schema\n{\n" + "".join(lines) + "}\n```\n"


def compose_description(
    base: str,
    params: ClassifiedParams,
    groups: list[ResponseGroup],
) -> str:
    """Return the full help text, ending with exactly one newline."""
    desc = base

    if params.path:
        lines = [
            f"  {p.option_name()}: {param_schema_text(p, s)}\n"
            for p, s in zip(params.path, params.path_schemas)
        ]
        desc += "\n## Argument Schema:\n" + _schema_block(lines)

    if params.query or params.header:
        lines = [
            f"  --{p.option_name()}: {param_schema_text(p, s)}\n"
            for p, s in zip(params.query + params.header, params.query_schemas + params.header_schemas)
        ]
        desc += "\n## Option Schema:\n" + _schema_block(lines)

    for group in groups:
        ct = f" ({group.content_type})" if group.has_schema else ""
        if len(group.codes) == 1:
            desc += f"\n## Response {group.codes[0]}{ct}\n"
            if group.description:
                desc += f"\n{group.description}\n"
            elif not group.has_schema:
                desc += "\nResponse has no body\n"
        else:
            desc += f"\n## Responses {'/'.join(group.codes)}{ct}\n"
            if not group.has_schema:
                desc += "\nResponse has no body\n"

        if group.header_names:
            desc += "\nHeaders: " + ", ".join(group.header_names) + "\n"

        if group.has_schema:
            desc += f"\n```schema\n{group.schema_text}\n```\n"

    return desc.strip("\n") + "\n"
