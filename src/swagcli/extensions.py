"""Typed, defaulting access to ``x-cli-*`` vendor extensions.

Every document node (info, path item, operation, parameter, response) may
carry vendor extensions.  In a decoded document they are simply keys on the
node's dict, so the *bag* passed here is usually the node itself.

These two functions are the only way the compiler reads per-node overrides.
A missing bag, a missing key or a value of the wrong type always yields the
caller's default; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

T = TypeVar("T")

EXT_NAME = "x-cli-name"
"""Change the CLI name for an operation or parameter."""

EXT_ALIASES = "x-cli-aliases"
"""Additional command aliases for an operation."""

EXT_DESCRIPTION = "x-cli-description"
"""Change the description of an operation, parameter or response."""

EXT_IGNORE = "x-cli-ignore"
"""Ignore a path, operation, or parameter."""

EXT_HIDDEN = "x-cli-hidden"
"""Create a command that is left out of help output but can still be called."""

EXT_CLI_CONFIG = "x-cli-config"
"""Document-level auto-configuration block."""


def _is_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int; an extension of ``true`` is not a number.
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)


def get_ext(bag: Optional[Mapping[str, Any]], key: str, default: T) -> T:
    """Return ``bag[key]`` if present and of the same type as *default*.

    Args:
        bag: The node (or extension mapping) to read from.  ``None`` is
            treated as empty.
        key: Extension key, e.g. :data:`EXT_NAME`.
        default: Returned when the key is absent, ``None``, or of another
            type.  Its type is the expected type of the value.

    Example::

        >>> get_ext({"x-cli-hidden": True}, EXT_HIDDEN, False)
        True
        >>> get_ext({"x-cli-hidden": "yes"}, EXT_HIDDEN, False)
        False
    """
    if not isinstance(bag, Mapping):
        return default
    value = bag.get(key)
    if value is None:
        return default
    if default is None or _is_type(value, type(default)):
        return value
    return default


def get_ext_list(
    bag: Optional[Mapping[str, Any]],
    key: str,
    default: list[T],
    item_type: type = str,
) -> list[T]:
    """Return the list stored under *key*, keeping only items of *item_type*.

    Empty strings and items of another type are dropped.  The *default* is
    returned (as a new list) when the key is absent, is not a list, or is an
    empty list.
    """
    if isinstance(bag, Mapping):
        value = bag.get(key)
        if isinstance(value, list) and value:
            return [
                item
                for item in value
                if _is_type(item, item_type) and item != ""
            ]
    return list(default)
