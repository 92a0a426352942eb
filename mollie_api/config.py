"""
Configuration loader for the Mollie client.

Settings are resolved in this order, later sources winning:
1. defaults on ClientSettings
2. optional YAML file
3. MOLLIE_* environment variables (a local .env file is loaded first)
4. explicit keyword overrides
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError

logger = logging.getLogger(__name__)

API_ENDPOINT = "https://api.mollie.nl"
API_VERSION = "v1"

_ENV_KEYS = {
    "api_key": "MOLLIE_API_KEY",
    "api_endpoint": "MOLLIE_API_ENDPOINT",
    "api_version": "MOLLIE_API_VERSION",
    "timeout_seconds": "MOLLIE_TIMEOUT_SECONDS",
}


class ClientSettings(BaseModel):
    """Mollie client configuration"""

    api_key: SecretStr
    api_endpoint: str = API_ENDPOINT
    api_version: str = API_VERSION
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=300.0)
    user_agent: str = "mollie-api-python"

    @property
    def base_url(self) -> str:
        return f"{self.api_endpoint.rstrip('/')}/{self.api_version.strip('/')}/"


def load_client_settings(config_path: Optional[Path] = None, **overrides: Any) -> ClientSettings:
    """
    Load and validate client settings

    Args:
        config_path: Optional YAML file with ClientSettings keys
        **overrides: Values that take precedence over file and environment

    Returns:
        Validated ClientSettings object

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValidationError: If the merged settings don't match the schema
    """
    load_dotenv(find_dotenv(usecwd=True))

    data: Dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data.update(yaml.safe_load(f) or {})

    for field_name, env_name in _ENV_KEYS.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        settings = ClientSettings(**data)
    except ValidationError as e:
        # Locations only: error details carry the raw input values.
        logger.error(f"Client settings validation failed: {e.error_count()} error(s) in {[err['loc'] for err in e.errors()]}")
        raise
    logger.info(f"Loaded Mollie client settings for {settings.base_url}")
    return settings
