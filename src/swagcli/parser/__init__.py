"""Swagger 2 document parser -- decode text, check the version, inline ``$ref``.

This sub-package turns raw document text (already fetched by the host) into
a plain ``dict`` tree that the compiler walks.

Typical usage::

    from swagcli.parser import parse_document, resolve_refs, validate_swagger_version

    raw = parse_document(text)
    validate_swagger_version(raw)
    doc = resolve_refs(raw)

Sub-modules:

* :mod:`~swagcli.parser.loader` -- JSON/YAML decoding, Swagger 2 detection
  and version validation.
* :mod:`~swagcli.parser.resolver` -- internal ``$ref`` resolution with
  circular-reference detection.
"""

from swagcli.parser.loader import detect, parse_document, validate_swagger_version
from swagcli.parser.resolver import resolve_refs

__all__ = ["detect", "parse_document", "validate_swagger_version", "resolve_refs"]
