"""Compile a Swagger 2 document into an :class:`~swagcli.models.API`.

This is the core of swagcli.  :func:`compile_document` validates the
document version, inlines ``$ref`` pointers and walks every path item and
HTTP method, emitting one :class:`~swagcli.models.Operation` per pair via
:func:`compile_operation`.

**Per-operation pipeline**

1. Merge and classify parameters (:mod:`~swagcli.compiler.params`).
2. Resolve the command name and aliases (:mod:`~swagcli.compiler.naming`).
3. Group responses and compose the help text
   (:mod:`~swagcli.compiler.description`).
4. Attach the remaining metadata: group (first tag), hidden flag,
   deprecation marker and request body media type.

Document-level failures (wrong version, unresolvable reference or path)
abort the whole compilation; nothing is returned for a partially compiled
document.  Problems confined to one node fall back to defaults.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional
from urllib.parse import unquote

import httpx

from swagcli.compiler.autoconfig import load_auto_config
from swagcli.compiler.description import compose_description, group_responses
from swagcli.compiler.naming import resolve_name
from swagcli.compiler.params import classify_parameters
from swagcli.exceptions import SpecParseError
from swagcli.extensions import EXT_DESCRIPTION, EXT_HIDDEN, EXT_IGNORE, EXT_NAME, get_ext
from swagcli.models import API, APIAuth, Operation
from swagcli.parser.loader import validate_swagger_version
from swagcli.parser.resolver import resolve_refs

logger = logging.getLogger(__name__)

# Path-item keys in the order operations are emitted.
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

DEFAULT_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
DEPRECATED_MARKER = "do not use"


class Resolver(ABC):
    """Resolves document paths against the API's base URL.

    Implemented by :class:`~swagcli.loader.SwaggerLoader`; any other
    document source can implement it without the compiler knowing which.
    """

    @abstractmethod
    def get_base(self) -> httpx.URL:
        """Return the API base URL."""

    @abstractmethod
    def resolve(self, uri: str) -> httpx.URL:
        """Resolve *uri* against the base URL.

        Raises:
            ReferenceResolutionError: If *uri* cannot be resolved.
        """


def _first(values: Any) -> str:
    if isinstance(values, list) and values and isinstance(values[0], str):
        return values[0]
    return ""


def compile_operation(
    method: str,
    uri_template: httpx.URL,
    path_item: dict[str, Any],
    operation: dict[str, Any],
    doc: Optional[dict[str, Any]] = None,
) -> Operation:
    """Compile one operation node into an :class:`~swagcli.models.Operation`.

    Args:
        method: Upper-case HTTP method.
        uri_template: The operation's resolved URL (may contain ``{param}``
            placeholders, possibly percent-encoded).
        path_item: The enclosing path item (for shared parameters).
        operation: The operation node.
        doc: The whole document, consulted for document-wide ``produces``
            and ``consumes`` defaults.
    """
    doc = doc or {}
    params = classify_parameters(operation, path_item)
    template = unquote(str(uri_template))
    name, aliases = resolve_name(operation, method, unquote(uri_template.path))

    produces = _first(operation.get("produces")) or _first(doc.get("produces")) or DEFAULT_MEDIA_TYPE
    groups = group_responses(operation.get("responses") or {}, produces)

    base = get_ext(operation, EXT_DESCRIPTION, str(operation.get("description") or ""))
    long = compose_description(base, params, groups)

    consumes = _first(operation.get("consumes")) or _first(doc.get("consumes"))
    media_type = ""
    if params.has_body:
        media_type = consumes or DEFAULT_MEDIA_TYPE
    elif params.has_form_data:
        media_type = consumes or FORM_MEDIA_TYPE

    tags = operation.get("tags")
    group = str(tags[0]) if isinstance(tags, list) and tags else ""

    return Operation(
        name=name,
        group=group,
        aliases=aliases,
        short=str(operation.get("summary") or ""),
        long=long,
        method=method,
        uri_template=template,
        path_params=params.path,
        query_params=params.query,
        header_params=params.header,
        body_media_type=media_type,
        hidden=get_ext(operation, EXT_HIDDEN, False),
        deprecated=DEPRECATED_MARKER if operation.get("deprecated") is True else "",
    )


def extract_auth_schemes(doc: dict[str, Any]) -> list[APIAuth]:
    """Map ``securityDefinitions`` to the host's auth scheme names.

    ``apiKey`` definitions are not mapped; APIs that use them declare the
    header through ``x-cli-config`` instead.
    """
    schemes: list[APIAuth] = []
    seen: set[str] = set()
    definitions = doc.get("securityDefinitions")
    if not isinstance(definitions, dict):
        return schemes

    for definition in definitions.values():
        if not isinstance(definition, dict):
            continue
        auth: Optional[APIAuth] = None
        kind = definition.get("type")
        scopes = ",".join(sorted(definition.get("scopes") or {}))

        if kind == "basic":
            auth = APIAuth(name="http-basic", params={"username": "", "password": ""})
        elif kind == "oauth2" and definition.get("flow") == "application":
            auth = APIAuth(
                name="oauth-client-credentials",
                params={
                    "client_id": "",
                    "client_secret": "",
                    "token_url": str(definition.get("tokenUrl") or ""),
                    "scopes": scopes,
                },
            )
        elif kind == "oauth2" and definition.get("flow") == "accessCode":
            auth = APIAuth(
                name="oauth-authorization-code",
                params={
                    "client_id": "",
                    "authorize_url": str(definition.get("authorizationUrl") or ""),
                    "token_url": str(definition.get("tokenUrl") or ""),
                    "scopes": scopes,
                },
            )

        if auth is not None and auth.name not in seen:
            seen.add(auth.name)
            schemes.append(auth)

    return schemes


def compile_document(
    raw_doc: dict[str, Any],
    resolver: Resolver,
    base_path: Optional[str] = None,
) -> API:
    """Compile a decoded Swagger 2 document.

    Args:
        raw_doc: The decoded document, before ``$ref`` resolution.
        resolver: Resolves each path against the API base URL.
        base_path: Path prefix for every operation.  Defaults to the path of
            ``resolver.get_base()``.

    Raises:
        UnsupportedDocumentError: If the document is not Swagger 2.x.
        ReferenceResolutionError: If a ``$ref`` or a path cannot be resolved.
        SpecParseError: If ``paths`` is not an object.
    """
    validate_swagger_version(raw_doc)
    doc = resolve_refs(raw_doc)

    if base_path is None:
        base_path = resolver.get_base().path
    prefix = base_path.rstrip("/")

    paths = doc.get("paths") or {}
    if not isinstance(paths, dict):
        raise SpecParseError("'paths' must be an object")

    operations: list[Operation] = []
    for uri, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        if get_ext(path_item, EXT_IGNORE, False):
            logger.debug("Ignoring path %s", uri)
            continue

        resolved = resolver.resolve(prefix + uri)

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            if get_ext(operation, EXT_IGNORE, False):
                logger.debug("Ignoring operation %s %s", method.upper(), uri)
                continue
            operations.append(compile_operation(method.upper(), resolved, path_item, operation, doc))

    info = doc.get("info")
    if not isinstance(info, dict):
        info = {}
    auth_schemes = extract_auth_schemes(doc)

    return API(
        short=get_ext(info, EXT_NAME, str(info.get("title") or "")),
        long=get_ext(info, EXT_DESCRIPTION, str(info.get("description") or "")),
        operations=operations,
        auth=auth_schemes,
        auto_config=load_auto_config(doc, auth_schemes),
    )
