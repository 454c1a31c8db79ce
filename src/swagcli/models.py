"""Canonical Pydantic models shared across all swagcli modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Compiler output models** -- produced by the operation compiler and handed
to the host's command registry:
    :class:`ParameterLocation`, :class:`Param`, :class:`Operation`,
    :class:`ResponseGroup`, :class:`AutoConfigVar`, :class:`APIAuth`,
    :class:`AutoConfig`, and :class:`API`.

**Response models** -- the host's view of a completed HTTP exchange, which
the pagination link parser may rewrite:
    :class:`Link` and :class:`Response`.

**Configuration models**:
    :class:`Settings`.
"""

from __future__ import annotations

import enum
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

_SEPARATOR_RE = re.compile(r"[\W_]+")


def _case_words(chunk: str) -> list[str]:
    # Split lower/digit -> upper, and at the end of an acronym followed by a
    # capitalised word ("HTTPServer" -> "HTTP", "Server").  Unicode-aware.
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        prev, cur = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if cur.isupper() and (prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower())):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def kebab(value: str) -> str:
    """Convert *value* to lower-case hyphen-separated words.

    Letters outside ASCII are kept.

    Example::

        >>> kebab("listUsers")
        'list-users'
        >>> kebab("GET-v1/users/{id}")
        'get-v1-users-id'
        >>> kebab("créerUtilisateur")
        'créer-utilisateur'
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(value):
        if chunk:
            words.extend(w for w in _case_words(chunk) if w)
    return "-".join(w.lower() for w in words)


# --- Compiler Output Models ---


class ParameterLocation(str, enum.Enum):
    """Parameter locations that become CLI arguments or options.

    Swagger 2 also allows ``body`` and ``formData``; those never become
    :class:`Param` values.
    """

    PATH = "path"
    QUERY = "query"
    HEADER = "header"


class Param(BaseModel):
    """A single classified operation parameter (path, query or header).

    ``type`` is the first declared schema type, with one level of array item
    typing folded in (``array[string]``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    location: ParameterLocation
    type: str = "string"
    display_name: str = ""
    description: str = ""
    style: str = "simple"
    default: Any = None
    example: Any = None

    def option_name(self) -> str:
        """Return the CLI-facing name: the display name if set, kebab-cased."""
        return kebab(self.display_name or self.name)


class Operation(BaseModel):
    """One compiled command: a single path + HTTP method pair.

    Created once during compilation and immutable afterwards; the host's
    command registry owns it once returned.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    group: str = ""
    aliases: list[str] = Field(default_factory=list)
    short: str = ""
    long: str = ""
    method: str
    uri_template: str
    path_params: list[Param] = Field(default_factory=list)
    query_params: list[Param] = Field(default_factory=list)
    header_params: list[Param] = Field(default_factory=list)
    body_media_type: str = ""
    examples: list[str] = Field(default_factory=list)
    hidden: bool = False
    deprecated: str = ""


class ResponseGroup(BaseModel):
    """Status codes documented together because their content is equivalent.

    ``key`` is the equality key the codes were grouped under: a content
    digest for responses carrying a schema, or a per-code key otherwise.
    """

    key: str
    codes: list[str] = Field(default_factory=list)
    content_type: str = ""
    schema_text: str = ""
    header_names: list[str] = Field(default_factory=list)
    description: str = ""

    @property
    def has_schema(self) -> bool:
        return bool(self.schema_text)


class AutoConfigVar(BaseModel):
    """An interactive prompt declared in ``x-cli-config.prompt``."""

    description: str = ""
    example: Any = None
    default: Any = None
    enum: list[Any] = Field(default_factory=list)
    exclude: bool = False


class APIAuth(BaseModel):
    """A named authentication scheme with its parameter values."""

    name: str = ""
    params: dict[str, str] = Field(default_factory=dict)


class AutoConfig(BaseModel):
    """Document-level defaults applied when a profile is first configured."""

    headers: dict[str, str] = Field(default_factory=dict)
    prompt: dict[str, AutoConfigVar] = Field(default_factory=dict)
    auth: APIAuth = Field(default_factory=APIAuth)


class API(BaseModel):
    """The compiled form of one API document."""

    short: str = ""
    long: str = ""
    operations: list[Operation] = Field(default_factory=list)
    auth: list[APIAuth] = Field(default_factory=list)
    auto_config: Optional[AutoConfig] = None


# --- Response Models ---


class Link(BaseModel):
    """A hypermedia relation the host can follow (e.g. ``next``)."""

    rel: str
    uri: str


class Response(BaseModel):
    """A completed HTTP exchange as seen by link parsers.

    ``body`` is the decoded payload and may be replaced by a link parser;
    ``links`` maps a relation name to the links found for it.
    """

    status: int = 200
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None
    links: dict[str, list[Link]] = Field(default_factory=dict)


# --- Configuration ---


class Settings(BaseModel):
    """Runtime settings consumed by the compiler and link parser.

    Resolved by :func:`~swagcli.config.resolve_settings` from the config
    file, ``SWAGCLI_*`` environment variables and explicit overrides.
    """

    paginate: bool = Field(
        default=True, description="Follow page_token pagination in responses"
    )
    base_path: Optional[str] = Field(
        default=None, description="Override the base path prefixed to every operation"
    )
