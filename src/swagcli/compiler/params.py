"""Classify an operation's parameters into path, query and header lists.

Parameters are declared in two places in Swagger 2: on the path item (shared
by every method) and on the operation.  :func:`merge_parameters` combines
them with operation-level declarations winning on a name conflict, and
:func:`classify_parameters` turns the merged list into
:class:`~swagcli.models.Param` values partitioned by location.

Swagger 2 only attaches a ``schema`` to ``in: body`` parameters; every other
parameter declares ``type``/``items``/``format`` inline.  Those inline
keywords are treated as the parameter's schema so that both shapes classify
the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from swagcli.compiler.schema import schema_type
from swagcli.extensions import EXT_DESCRIPTION, EXT_IGNORE, EXT_NAME, get_ext
from swagcli.models import Param, ParameterLocation

_INLINE_SCHEMA_KEYS = (
    "type",
    "format",
    "items",
    "collectionFormat",
    "default",
    "enum",
    "minimum",
    "maximum",
    "minLength",
    "maxLength",
    "pattern",
    "multipleOf",
    "x-example",
)


@dataclass
class ClassifiedParams:
    """Output of :func:`classify_parameters`.

    Each ``*_schemas`` list is index-aligned with its param list and holds
    the schema the param was classified from (``None`` when it had none).
    """

    path: list[Param] = field(default_factory=list)
    query: list[Param] = field(default_factory=list)
    header: list[Param] = field(default_factory=list)
    path_schemas: list[Optional[dict[str, Any]]] = field(default_factory=list)
    query_schemas: list[Optional[dict[str, Any]]] = field(default_factory=list)
    header_schemas: list[Optional[dict[str, Any]]] = field(default_factory=list)
    has_body: bool = False
    has_form_data: bool = False


def merge_parameters(
    op_params: list[dict[str, Any]],
    path_params: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Combine operation and path-item parameters.

    Operation parameters come first in their declared order; path-item
    parameters follow unless one with the same name was already seen.
    """
    merged: list[dict[str, Any]] = []
    seen: set[str] = set()
    for param in op_params or []:
        if isinstance(param, dict):
            merged.append(param)
            seen.add(param.get("name", ""))
    for param in path_params or []:
        if isinstance(param, dict) and param.get("name", "") not in seen:
            merged.append(param)
    return merged


def param_schema(param: dict[str, Any]) -> Optional[dict[str, Any]]:
    """Return the schema describing *param*'s value, if any."""
    schema = param.get("schema")
    if isinstance(schema, dict):
        return schema
    if "type" in param:
        inline = {key: param[key] for key in _INLINE_SCHEMA_KEYS if key in param}
        if "x-example" in inline:
            inline["example"] = inline.pop("x-example")
        return inline
    return None


def param_type(schema: Optional[dict[str, Any]]) -> str:
    """Return the CLI type name for *schema*.

    The first declared type is used; arrays whose item type resolves become
    ``array[<item type>]``.  Parameters without a usable type are strings.

    Example::

        >>> param_type({"type": "array", "items": {"type": "string"}})
        'array[string]'
        >>> param_type({"type": ["integer", "null"]})
        'integer'
    """
    typ = schema_type(schema) or "string"
    if typ == "array" and schema is not None:
        item_type = schema_type(schema.get("items"))
        if item_type:
            typ += f"[{item_type}]"
    return typ


def classify_parameters(
    operation: dict[str, Any],
    path_item: dict[str, Any],
) -> ClassifiedParams:
    """Build the path/query/header :class:`~swagcli.models.Param` lists.

    Parameters marked ``x-cli-ignore`` are skipped.  ``body`` and
    ``formData`` parameters never become params; they only flag that the
    operation takes a request body.  Any other location is discarded.
    """
    result = ClassifiedParams()

    for raw in merge_parameters(operation.get("parameters", []), path_item.get("parameters", [])):
        if get_ext(raw, EXT_IGNORE, False):
            continue

        location_str = raw.get("in")
        if location_str == "body":
            result.has_body = True
            continue
        if location_str == "formData":
            result.has_form_data = True
            continue
        try:
            location = ParameterLocation(location_str)
        except ValueError:
            continue

        schema = param_schema(raw)
        param = Param(
            name=str(raw.get("name", "")),
            location=location,
            type=param_type(schema),
            display_name=get_ext(raw, EXT_NAME, ""),
            description=get_ext(raw, EXT_DESCRIPTION, str(raw.get("description") or "")),
            default=schema.get("default") if schema else None,
            example=schema.get("example") if schema else None,
        )

        if location == ParameterLocation.PATH:
            result.path.append(param)
            result.path_schemas.append(schema)
        elif location == ParameterLocation.QUERY:
            result.query.append(param)
            result.query_schemas.append(schema)
        else:
            result.header.append(param)
            result.header_schemas.append(schema)

    return result
