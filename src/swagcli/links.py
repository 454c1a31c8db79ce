"""Derive ``next`` page links from token-paginated collection responses.

Collection endpoints wrap their items in an envelope that carries paging
metadata::

    {"total_results": 120, "next_page_token": "20", "domains": [...]}

For such a response :class:`PageTokenLinkParser` does two things:

* adds a ``next`` link pointing at the same request with
  ``page_token=<next_page_token>`` in its query string, and
* replaces the body with the wrapped collection, so downstream filtering
  and formatting see a plain list.

A response counts as paginated only when its body is an object with a
``total_results`` field.  Anything else passes through untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

import httpx

from swagcli.models import Link, Response, Settings

logger = logging.getLogger(__name__)

TOTAL_RESULTS_FIELD = "total_results"
NEXT_TOKEN_FIELD = "next_page_token"
PAGE_TOKEN_PARAM = "page_token"
NEXT_REL = "next"

# Only a whole ``page_token`` parameter, not e.g. ``next_page_token``.
_PAGE_TOKEN_RE = re.compile(r"(?<![^&])page_token=\d+")


def next_query(query: str, token: str) -> str:
    """Return *query* rewritten to request the page identified by *token*.

    Example::

        >>> next_query("foo=bar", "10")
        'page_token=10&foo=bar'
        >>> next_query("page_token=10&foo=bar", "20")
        'page_token=20&foo=bar'
    """
    replacement = f"{PAGE_TOKEN_PARAM}={token}"
    if _PAGE_TOKEN_RE.search(query):
        return _PAGE_TOKEN_RE.sub(lambda _: replacement, query)
    if not query:
        return replacement
    return f"{replacement}&{query}"


def unwrap_collection(body: dict[str, Any]) -> Any:
    """Return the first list-valued field of *body* in ascending key order.

    Returns *body* itself when no field holds a list.
    """
    for key in sorted(body, key=str):
        if isinstance(body[key], list):
            logger.debug("Unwrapping collection field %r", key)
            return body[key]
    return body


class PageTokenLinkParser:
    """Link parser for ``total_results`` / ``next_page_token`` envelopes.

    Args:
        settings: When ``settings.paginate`` is false the parser does
            nothing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or Settings()

    def parse_links(self, base: Union[str, httpx.URL], response: Response) -> None:
        """Inspect *response* in place.

        Args:
            base: The URL of the request that produced *response*.
            response: The completed response; its ``body`` may be replaced
                and a ``next`` link appended to its ``links``.
        """
        if not self._settings.paginate:
            return

        body = response.body
        if not isinstance(body, dict) or body.get(TOTAL_RESULTS_FIELD) is None:
            return
        logger.debug("Possible pagination (total_results=%s)", body[TOTAL_RESULTS_FIELD])

        token = body.get(NEXT_TOKEN_FIELD)
        if token is not None and token != "":
            query = _raw_query(base)
            if query is not None:
                rewritten = next_query(query, str(token))
                logger.debug("Next page query: %s", rewritten)
                response.links.setdefault(NEXT_REL, []).append(
                    Link(rel=NEXT_REL, uri=f"?{rewritten}")
                )

        response.body = unwrap_collection(body)


def _raw_query(base: Union[str, httpx.URL]) -> Optional[str]:
    try:
        url = base if isinstance(base, httpx.URL) else httpx.URL(base)
    except (httpx.InvalidURL, TypeError) as exc:
        logger.debug("Cannot parse request URL %r: %s", base, exc)
        return None
    return url.query.decode("ascii", errors="replace")


def new_link_parser(settings: Optional[Settings] = None) -> PageTokenLinkParser:
    """Create a pagination link parser for registration with the host."""
    return PageTokenLinkParser(settings)
