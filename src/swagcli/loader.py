"""Host-facing Swagger 2 loader.

The host fetches a candidate document, asks each registered loader whether
it recognises the content (:meth:`SwaggerLoader.detect`) and hands the
content to the first one that does (:meth:`SwaggerLoader.load`).  Loaders
are registered explicitly by the host::

    from swagcli import links, loader

    host.add_loader(loader.new())
    host.add_link_parser(links.new_link_parser(settings))
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx

from swagcli.compiler.operations import Resolver, compile_document
from swagcli.exceptions import ReferenceResolutionError
from swagcli.models import API, Settings
from swagcli.parser.loader import detect, parse_document

logger = logging.getLogger(__name__)

URLLike = Union[str, httpx.URL]

LOCATION_HINTS = ["/openapi.json", "/openapi.yaml", "openapi.json", "openapi.yaml"]


def _to_url(value: URLLike) -> httpx.URL:
    try:
        return value if isinstance(value, httpx.URL) else httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ReferenceResolutionError(f"Invalid URL {value!r}: {exc}") from exc


class SwaggerLoader(Resolver):
    """Loads Swagger 2 documents and resolves their paths against the API base.

    Args:
        settings: Optional settings; ``base_path`` overrides the path prefix
            taken from the entrypoint URL.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or Settings()
        self._location: Optional[httpx.URL] = None
        self._base: Optional[httpx.URL] = None

    def location_hints(self) -> list[str]:
        """Relative locations the host may probe for a document."""
        return list(LOCATION_HINTS)

    def detect(self, content: Union[str, bytes]) -> bool:
        """Return True if *content* is a Swagger 2 document."""
        return detect(content)

    def get_base(self) -> httpx.URL:
        if self._base is None:
            raise ReferenceResolutionError("No base URL set; call load() first")
        return self._base

    def resolve(self, uri: str) -> httpx.URL:
        base = self.get_base()
        try:
            return base.join(uri)
        except httpx.InvalidURL as exc:
            raise ReferenceResolutionError(f"Cannot resolve {uri!r} against {base}: {exc}") from exc

    def load(
        self,
        entrypoint: URLLike,
        spec: URLLike,
        content: Union[str, bytes],
    ) -> API:
        """Compile the document at *spec* for the API rooted at *entrypoint*.

        Args:
            entrypoint: The API base URL; its path prefixes every operation.
            spec: Where *content* was fetched from, used as a format hint.
            content: The document text.

        Raises:
            SpecParseError: If *content* cannot be decoded.
            UnsupportedDocumentError: If it is not Swagger 2.x.
            ReferenceResolutionError: If a URL, path or ``$ref`` is invalid.
        """
        self._base = _to_url(entrypoint)
        self._location = _to_url(spec)

        suffix = self._location.path.rsplit(".", 1)[-1].lower() if "." in self._location.path else ""
        hint = "yaml" if suffix in ("yaml", "yml") else "json" if suffix == "json" else ""
        logger.debug("Loading %s (hint=%s)", self._location, hint or "auto")

        raw = parse_document(content, hint=hint)
        return compile_document(raw, self, base_path=self._settings.base_path)


def new(settings: Optional[Settings] = None) -> SwaggerLoader:
    """Create a Swagger 2 loader for registration with the host."""
    return SwaggerLoader(settings)
