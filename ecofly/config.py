"""Configuration settings for the EcoFly backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger("ecofly.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _get_list(env_var: str, default: str) -> list[str]:
    raw = os.getenv(env_var, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_openai_api_key() -> str:
    """Resolve the OpenAI API key.

    ``OPENAI_API_KEY`` wins when set. Otherwise the key is read from AWS SSM
    Parameter Store using the parameter named by ``ECOFLY_OPENAI_KEY_PARAM``.
    The value is cached in-memory to avoid repeated SSM calls.
    """

    value = os.getenv("OPENAI_API_KEY")
    if value:
        return value

    parameter_name = os.getenv("ECOFLY_OPENAI_KEY_PARAM")
    if not parameter_name:
        raise RuntimeError("OpenAI API key not configured")

    ssm_client = boto3.client(
        "ssm",
        region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
    )
    try:
        response = ssm_client.get_parameter(Name=parameter_name, WithDecryption=True)
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        logger.error("Failed to load OpenAI API key from SSM: %s", exc)
        raise RuntimeError("Unable to load OpenAI API key from SSM") from exc

    if not value:
        logger.error("Received empty OpenAI API key from SSM")
        raise RuntimeError("OpenAI API key not configured in SSM")

    return value


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    ecofly_env: str = os.getenv("ECOFLY_ENV", "local")
    log_level: str = os.getenv("ECOFLY_LOG_LEVEL", "INFO")

    # OpenAI / eco-plan settings
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    openai_timeout: float = float(os.getenv("OPENAI_TIMEOUT", "30.0"))
    openai_api_key: str = ""

    # Live traffic (OpenSky state vectors)
    opensky_base_url: str = os.getenv(
        "OPENSKY_BASE_URL",
        "https://opensky-network.org/api/states/all",
    )
    opensky_timeout: float = float(os.getenv("OPENSKY_TIMEOUT", "10.0"))
    live_traffic_poll_seconds: float = float(os.getenv("LIVE_TRAFFIC_POLL_SECONDS", "60"))
    enable_live_traffic_poller: bool = _get_bool("ENABLE_LIVE_TRAFFIC_POLLER", default=True)

    cors_allow_origins: list[str] = field(
        default_factory=lambda: _get_list("CORS_ALLOW_ORIGINS", "http://localhost:3000")
    )


settings = Settings()

# Populate the API key lazily so tests can override behavior via env
try:
    settings.openai_api_key = get_openai_api_key()
except RuntimeError:
    logger.warning("OpenAI API key not available at import time")

__all__ = ["settings", "Settings", "get_openai_api_key"]
