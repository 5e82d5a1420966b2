"""Client settings from an optional YAML file overlaid with environment variables.

Environment:
- AA_API_TOKEN: API token (required unless given in the YAML file)
- AA_BASE_URL: API base URL
- AA_TIMEOUT: request timeout in seconds (unset means no timeout)
- AA_NICE: default politeness flag for completion-family calls
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, SecretStr

ALEPH_ALPHA_API_BASE_URL = "https://api.aleph-alpha.com"

ENV_VARS = {
    "api_token": "AA_API_TOKEN",
    "base_url": "AA_BASE_URL",
    "timeout": "AA_TIMEOUT",
    "nice": "AA_NICE",
}


class ClientSettings(BaseModel):
    """Everything needed to construct a :class:`~aleph_alpha_api.client.Client`."""

    api_token: SecretStr
    base_url: str = ALEPH_ALPHA_API_BASE_URL
    timeout: float | None = None
    nice: bool | None = None


def load_cfg(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str | Path | None = None) -> ClientSettings:
    """
    Build settings from a YAML file and the environment.

    Environment variables take precedence over the file.

    Args:
        path: Optional YAML config path with keys api_token, base_url, timeout, nice.

    Raises:
        ValueError: If no API token is configured.
    """
    cfg = load_cfg(path) if path is not None else {}
    for key, var in ENV_VARS.items():
        value = os.getenv(var)
        if value:
            cfg[key] = value
    if not cfg.get("api_token"):
        raise ValueError(f"{ENV_VARS['api_token']} must be set or api_token given in the config file")
    return ClientSettings.model_validate(cfg)
