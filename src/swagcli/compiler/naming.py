"""Command names and aliases for compiled operations.

The canonical name is the kebab-cased ``operationId`` (``listUsers`` ->
``list-users``), falling back to ``<method>-<path>`` for anonymous
operations.  Earlier releases named commands with a lower-case slug of the
``operationId`` (``listusers``); that spelling is kept as an alias whenever
it differs so existing scripts keep working.  An ``x-cli-name`` extension
replaces all of this.

Name uniqueness across operations is the host registry's concern.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from swagcli.extensions import EXT_ALIASES, EXT_NAME, get_ext, get_ext_list
from swagcli.models import kebab

_SLUG_INVALID_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lower-case *value*, transliterate to ASCII and hyphenate the rest.

    Example::

        >>> slugify("listUsers")
        'listusers'
        >>> slugify("Créer un Thing!")
        'creer-un-thing'
    """
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    return _SLUG_INVALID_RE.sub("-", ascii_value.lower()).strip("-")


def operation_name(operation: dict[str, Any], method: str, path: str) -> str:
    """Return the kebab-case command name before extension overrides."""
    name = kebab(str(operation.get("operationId") or ""))
    if not name:
        name = kebab(f"{method}-{path.strip('/')}")
    return name


def resolve_name(
    operation: dict[str, Any],
    method: str,
    path: str,
) -> tuple[str, list[str]]:
    """Return ``(name, aliases)`` for *operation*.

    Args:
        operation: The operation node.
        method: Upper-case HTTP method.
        path: The operation's path (resolved path of the URI template).

    The legacy slug alias (when it applies) comes first, followed by the
    entries of ``x-cli-aliases``.
    """
    name = operation_name(operation, method, path)
    aliases: list[str] = []

    override = get_ext(operation, EXT_NAME, "")
    if override:
        name = override
    else:
        legacy = slugify(str(operation.get("operationId") or ""))
        if legacy and legacy != name:
            aliases.append(legacy)

    aliases.extend(get_ext_list(operation, EXT_ALIASES, []))
    return name, aliases
