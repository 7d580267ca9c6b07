from __future__ import annotations

import os
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


class ServiceConfig(BaseModel):
    """Location of the remote signing service."""

    base_url: str = "http://localhost:8080"
    identities_path: str = "/identities"
    sign_path: str = "/sign"
    timeout: float = 10.0


class KeybridgeConfig(BaseModel):
    """Top-level configuration model."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)


def load_config(path: Optional[str] = None) -> KeybridgeConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to KEYBRIDGE_CONFIG env
            variable or 'keybridge.yaml' in the current directory.
    """

    config_path = path or os.getenv("KEYBRIDGE_CONFIG", "keybridge.yaml")
    if os.path.exists(config_path):
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            config = KeybridgeConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as exc:
            raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc
    else:
        config = KeybridgeConfig()

    env_url = os.getenv("KEYBRIDGE_SERVICE_URL")
    if env_url:
        config.service.base_url = env_url
    return config
