"""Render JSON Schema nodes as compact, human-readable text for help output.

Objects render as brace blocks with one property per line (``*`` marks a
required property), arrays as bracket blocks, and scalars as a parenthesised
type summary followed by the description::

    {
      id*: (integer format:int64) Unique identifier
      tags: [
        (string)
      ]
    }

``mode`` selects which side of the wire is being documented: ``readOnly``
properties are hidden when rendering request input (:data:`MODE_WRITE`) and
``writeOnly`` properties are hidden for response bodies (:data:`MODE_READ`).
"""

from __future__ import annotations

import json
from typing import Any

MODE_READ = "read"
MODE_WRITE = "write"

_SCALAR_KEYWORDS = (
    ("format", "format"),
    ("default", "default"),
    ("minimum", "min"),
    ("maximum", "max"),
    ("minLength", "min-length"),
    ("maxLength", "max-length"),
    ("pattern", "pattern"),
    ("multipleOf", "multiple-of"),
)


def schema_type(schema: Any) -> str:
    """Return the first declared type of *schema*, inferring object/array.

    Returns an empty string when nothing can be determined.
    """
    if not isinstance(schema, dict):
        return ""
    declared = schema.get("type")
    if isinstance(declared, list):
        declared = next((t for t in declared if isinstance(t, str)), None)
    if isinstance(declared, str) and declared:
        return declared
    if "properties" in schema or "allOf" in schema:
        return "object"
    if "items" in schema:
        return "array"
    return ""


def render_schema(schema: Any, indent: str = "", mode: str = MODE_READ) -> str:
    """Render *schema* as text, continuing lines with *indent*."""
    if not isinstance(schema, dict):
        return "<any>"

    ref = schema.get("$ref")
    if isinstance(ref, str):
        return f"<rec:{ref.rsplit('/', 1)[-1]}>"

    typ = schema_type(schema)
    if typ == "object":
        return _render_object(_merge_all_of(schema), indent, mode)
    if typ == "array":
        inner = indent + "  "
        return "[\n" + inner + render_schema(schema.get("items"), inner, mode) + "\n" + indent + "]"
    return _render_scalar(schema, typ)


def _merge_all_of(schema: dict[str, Any]) -> dict[str, Any]:
    parts = schema.get("allOf")
    if not isinstance(parts, list):
        return schema
    properties: dict[str, Any] = {}
    required: list[str] = []
    for part in [schema, *parts]:
        if not isinstance(part, dict):
            continue
        properties.update(part.get("properties") or {})
        required.extend(r for r in part.get("required") or [] if r not in required)
    merged = {k: v for k, v in schema.items() if k != "allOf"}
    merged["properties"] = properties
    merged["required"] = required
    return merged


def _render_object(schema: dict[str, Any], indent: str, mode: str) -> str:
    properties = schema.get("properties") or {}
    additional = schema.get("additionalProperties")
    if not properties and not isinstance(additional, dict):
        return _render_scalar(schema, "object")

    required = set(schema.get("required") or [])
    inner = indent + "  "
    lines = ["{"]
    for name in sorted(properties):
        prop = properties[name]
        if isinstance(prop, dict):
            if mode == MODE_WRITE and prop.get("readOnly"):
                continue
            if mode == MODE_READ and prop.get("writeOnly"):
                continue
        marker = "*" if name in required else ""
        lines.append(f"{inner}{name}{marker}: {render_schema(prop, inner, mode)}")
    if isinstance(additional, dict):
        lines.append(f"{inner}<any>: {render_schema(additional, inner, mode)}")
    lines.append(indent + "}")
    return "\n".join(lines)


def _render_scalar(schema: dict[str, Any], typ: str) -> str:
    tags = [typ or "any"]
    if schema.get("x-nullable") or schema.get("nullable"):
        tags.append("nullable:true")
    for key, label in _SCALAR_KEYWORDS:
        if key in schema and schema[key] is not None:
            tags.append(f"{label}:{_scalar_text(schema[key])}")
    enum = schema.get("enum")
    if isinstance(enum, list) and enum:
        tags.append("enum:" + ",".join(_scalar_text(v) for v in enum))

    text = "(" + " ".join(tags) + ")"
    description = schema.get("description")
    if isinstance(description, str) and description.strip():
        text += " " + " ".join(description.split())
    return text


def _scalar_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)
