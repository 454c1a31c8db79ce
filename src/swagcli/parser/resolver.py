"""Inline internal ``$ref`` pointers in a Swagger 2 document.

Swagger 2 documents share definitions through ``#/definitions/...``,
``#/parameters/...`` and ``#/responses/...`` pointers.  :func:`resolve_refs`
returns a deep copy of the document where each pointer is replaced by its
target, so the compiler never has to follow references itself.

A pointer that re-enters a definition already being expanded (a tree-shaped
model referencing itself) is left as the original ``{"$ref": ...}`` dict;
the schema renderer prints those as a recursion marker.
"""

from __future__ import annotations

from typing import Any

from swagcli.exceptions import ReferenceResolutionError


def resolve_refs(doc: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *doc* with every internal ``$ref`` inlined.

    Raises:
        ReferenceResolutionError: If a pointer targets a missing node, or is
            an external (file or URL) reference.
    """
    return _expand(doc, doc, frozenset())


def lookup_pointer(ref: str, root: dict[str, Any]) -> Any:
    """Follow a ``#/a/b/c`` JSON Pointer (RFC 6901) from *root*.

    Raises:
        ReferenceResolutionError: If the pointer is external or does not
            resolve.
    """
    if not ref.startswith("#/"):
        raise ReferenceResolutionError(
            f"External $ref not supported: {ref}. Only '#/...' references are resolved."
        )

    node: Any = root
    for raw in ref[2:].split("/"):
        token = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            raise ReferenceResolutionError(
                f"Cannot resolve $ref '{ref}': '{token}' not found"
            )
    return node


def _expand(node: Any, root: dict[str, Any], active: frozenset[str]) -> Any:
    if isinstance(node, list):
        return [_expand(item, root, active) for item in node]
    if not isinstance(node, dict):
        return node

    ref = node.get("$ref")
    if isinstance(ref, str):
        if ref in active:
            return dict(node)
        return _expand(lookup_pointer(ref, root), root, active | {ref})

    return {key: _expand(value, root, active) for key, value in node.items()}
