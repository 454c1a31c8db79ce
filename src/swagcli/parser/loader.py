"""Decode Swagger 2 documents and check that they are Swagger 2.

Fetching is the host's job; everything here works on text the host already
has in hand.

* :func:`detect` -- cheap content sniffing used by the host to pick a loader.
* :func:`parse_document` -- JSON or YAML text to a ``dict``.
* :func:`validate_swagger_version` -- reject anything that is not 2.x.
"""

from __future__ import annotations

import json
import re
from typing import Any, Union

import yaml

from swagcli.exceptions import SpecParseError, UnsupportedDocumentError

_SWAGGER2_RE = re.compile(r"""['"]?swagger['"]?\s*:\s*['"]?2""")


def detect(content: Union[str, bytes]) -> bool:
    """Return True if *content* looks like a Swagger 2 document.

    Example::

        >>> detect('{"swagger": "2.0", "paths": {}}')
        True
        >>> detect("openapi: 3.0.0")
        False
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return _SWAGGER2_RE.search(content) is not None


def parse_document(content: Union[str, bytes], hint: str = "") -> dict[str, Any]:
    """Parse document text as JSON or YAML.

    JSON is tried first unless *hint* is ``"yaml"``; valid JSON is also valid
    YAML but the JSON decoder is stricter and gives better errors.

    Args:
        content: The raw document text.
        hint: Optional format hint (``"json"`` or ``"yaml"``), e.g. from a
            file extension or content type.

    Returns:
        The decoded document.

    Raises:
        SpecParseError: If the content is empty, cannot be decoded, or does
            not decode to a mapping.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    if not content.strip():
        raise SpecParseError("Document is empty")

    json_error: Exception | None = None
    if hint != "yaml":
        try:
            return _require_mapping(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        return _require_mapping(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        msg = "Failed to parse document as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Document must be a JSON/YAML object (got {kind})")
    return result


def validate_swagger_version(doc: dict[str, Any]) -> str:
    """Return the document's ``swagger`` version if it is 2.x.

    Raises:
        UnsupportedDocumentError: For OpenAPI 3 documents, documents without
            a ``swagger`` field, or any other version.
    """
    version = doc.get("swagger")
    if version is None:
        if "openapi" in doc:
            raise UnsupportedDocumentError(
                f"OpenAPI {doc['openapi']} is not supported; only Swagger 2.x documents are"
            )
        raise UnsupportedDocumentError(
            "Missing 'swagger' field. Is this a Swagger 2.x document?"
        )

    version_str = str(version)
    if version_str == "2" or version_str.startswith("2."):
        return version_str
    raise UnsupportedDocumentError(f"Unsupported Swagger version: {version_str}")
