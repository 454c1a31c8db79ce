"""Settings resolution with XDG paths and a precedence chain.

swagcli itself never writes configuration; the host owns bootstrap and
config-file creation.  This module only *reads*:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.swagcli/`` on macOS and Windows, overridable with
  ``SWAGCLI_CONFIG_DIR``.  See :func:`get_config_dir`.
* **Settings file** -- an optional ``config.json`` deserialised into
  :class:`~swagcli.models.Settings`.
* **Precedence resolution** -- :func:`resolve_settings` layers environment
  variables and explicit overrides on top of the file.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from swagcli.exceptions import ConfigError
from swagcli.models import Settings

_APP_NAME = "swagcli"
_CONFIG_FILENAME = "config.json"

ENV_CONFIG_DIR = "SWAGCLI_CONFIG_DIR"
ENV_NO_PAGINATE = "SWAGCLI_NO_PAGINATE"
ENV_BASE_PATH = "SWAGCLI_BASE_PATH"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_config_dir() -> Path:
    """Return the configuration directory (not created).

    Resolution order: ``$SWAGCLI_CONFIG_DIR``; on Linux/BSD
    ``$XDG_CONFIG_HOME/swagcli`` (default ``~/.config/swagcli``); elsewhere
    ``~/.swagcli``.
    """
    override = os.environ.get(ENV_CONFIG_DIR, "")
    if override:
        return Path(override)
    if _is_xdg_platform():
        xdg = os.environ.get("XDG_CONFIG_HOME", "")
        base = Path(xdg) if xdg else Path.home() / ".config"
        return base / _APP_NAME
    return Path.home() / f".{_APP_NAME}"


def _settings_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_settings() -> Settings:
    """Load :class:`~swagcli.models.Settings` from ``config.json``.

    Returns:
        The deserialised settings, or defaults when the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _settings_path()
    if not path.is_file():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid settings at {path}: {exc}") from exc


def _env_flag(name: str) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {raw!r}")


# --- Precedence resolution ---


def resolve_settings(
    paginate: Optional[bool] = None,
    base_path: Optional[str] = None,
) -> Settings:
    """Resolve settings with the full precedence chain.

    Precedence (high to low):
        1. Explicit arguments (``paginate``, ``base_path``)
        2. Environment variables (``SWAGCLI_NO_PAGINATE``, ``SWAGCLI_BASE_PATH``)
        3. Settings file (``<config_dir>/config.json``)
        4. Defaults

    Raises:
        ConfigError: On an invalid settings file or environment value.
    """
    settings = load_settings()
    updates: dict[str, Any] = {}

    no_paginate = _env_flag(ENV_NO_PAGINATE)
    if no_paginate is not None:
        updates["paginate"] = not no_paginate
    env_base_path = os.environ.get(ENV_BASE_PATH)
    if env_base_path:
        updates["base_path"] = env_base_path

    if paginate is not None:
        updates["paginate"] = paginate
    if base_path is not None:
        updates["base_path"] = base_path

    return settings.model_copy(update=updates)
