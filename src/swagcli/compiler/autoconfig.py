"""Read the document-level ``x-cli-config`` auto-configuration block.

Example extension::

    x-cli-config:
      security: http-basic
      headers:
        Accept: application/json
      prompt:
        username:
          description: Your account name
      params:
        username: "{username}"

A missing block is normal and yields ``None``.  A block that does not decode
into this shape is reported as a warning and also yields ``None``; it never
stops the document from compiling.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from swagcli import output
from swagcli.exceptions import AutoConfigDecodeError
from swagcli.extensions import EXT_CLI_CONFIG
from swagcli.models import APIAuth, AutoConfig, AutoConfigVar

logger = logging.getLogger(__name__)


class CLIConfigExtension(BaseModel):
    """The wire shape of ``x-cli-config``.

    YAML scalars such as ``X-Api-Version: 2`` decode as numbers; they are
    accepted as their string form.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    security: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    prompt: dict[str, AutoConfigVar] = Field(default_factory=dict)
    params: dict[str, str] = Field(default_factory=dict)


def decode_cli_config(node: Any) -> CLIConfigExtension:
    """Decode the raw extension node.

    Raises:
        AutoConfigDecodeError: If *node* does not match
            :class:`CLIConfigExtension`.
    """
    try:
        return CLIConfigExtension.model_validate(node)
    except ValidationError as exc:
        raise AutoConfigDecodeError(f"Unable to decode {EXT_CLI_CONFIG}: {exc}") from exc


def load_auto_config(
    doc: dict[str, Any],
    auth_schemes: Optional[list[APIAuth]] = None,
) -> Optional[AutoConfig]:
    """Build the :class:`~swagcli.models.AutoConfig` for *doc*.

    Param values start from the params of the auth scheme named by
    ``security`` (when that scheme is in *auth_schemes*), and the block's own
    ``params`` override them.
    """
    node = doc.get(EXT_CLI_CONFIG)
    if node is None:
        return None

    try:
        config = decode_cli_config(node)
    except AutoConfigDecodeError as exc:
        logger.warning("%s", exc)
        output.warning(str(exc))
        return None

    params: dict[str, str] = {}
    for scheme in auth_schemes or []:
        if scheme.name == config.security:
            params.update(scheme.params)
            break
    params.update(config.params)

    return AutoConfig(
        headers=config.headers,
        prompt=config.prompt,
        auth=APIAuth(name=config.security, params=params),
    )
