"""Settings from the environment and ``~/.modelshelf/config.json``.

Environment variables win over the config file. A missing, empty or
malformed config file is ignored.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = "~/.modelshelf/config.json"

ENV_RUNTIME_CONFIG = "MODELSHELF_RUNTIME_CONFIG"
ENV_CUSTOM_MODELS = "MODELSHELF_CUSTOM_MODELS"
ENV_SORT = "MODELSHELF_SORT"


@dataclass
class Settings:
    runtime_config: Optional[str] = None  # file path or URL; None = bundled
    custom_models: str = ""
    sort: str = "score"


def _read_config_file(path: str) -> dict[str, Any]:
    config_path = os.path.expanduser(path)
    if not os.path.exists(config_path):
        return {}
    try:
        with open(config_path) as f:
            raw = f.read().strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, exc)
        return {}
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        logger.warning("Ignoring malformed config file %s", config_path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: not a JSON object", config_path)
        return {}
    return data


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[str] = None,
) -> Settings:
    """Resolve settings: env var, then config file key, then default."""
    env = os.environ if environ is None else environ
    data = _read_config_file(config_path or CONFIG_PATH)

    def pick(env_name: str, key: str) -> Optional[str]:
        value = env.get(env_name, "")
        if value:
            return value
        file_value = data.get(key)
        if file_value is None or file_value == "":
            return None
        return str(file_value)

    settings = Settings(
        runtime_config=pick(ENV_RUNTIME_CONFIG, "runtime_config"),
        custom_models=pick(ENV_CUSTOM_MODELS, "custom_models") or "",
        sort=pick(ENV_SORT, "sort") or "score",
    )
    logger.debug("Resolved settings: %s", settings)
    return settings
