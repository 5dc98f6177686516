"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field

BASE_URL_V1 = "https://api.assemblyai.com/v1"
BASE_URL_V2 = "https://api.assemblyai.com/v2"

DEFAULT_TIMEOUT_SECONDS = 60.0


class ClientConfig(BaseModel, frozen=True):
    """AssemblyAI API connection configuration."""

    api_key: str = Field(min_length=1)
    base_url: str = BASE_URL_V2
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


def load_config() -> ClientConfig:
    """
    Loads configuration from environment variables.

    Env Vars:
        ASSEMBLYAI_API_KEY: required API key
        ASSEMBLYAI_BASE_URL: defaults to the v2 endpoint
        ASSEMBLYAI_TIMEOUT: request timeout in seconds, defaults to 60

    Raises:
        ValueError: If ASSEMBLYAI_API_KEY is missing or the timeout is invalid.
    """
    api_key = os.getenv("ASSEMBLYAI_API_KEY", "").strip()
    if not api_key:
        raise ValueError("ASSEMBLYAI_API_KEY must be set")

    return ClientConfig(
        api_key=api_key,
        base_url=os.getenv("ASSEMBLYAI_BASE_URL") or BASE_URL_V2,
        timeout=float(os.getenv("ASSEMBLYAI_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)),
    )
