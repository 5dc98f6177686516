"""Wiring of configuration, httpx and the AssemblyAI client."""

import logging

import httpx

from assemblyai_client.config import (
    BASE_URL_V2,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
    load_config,
)
from assemblyai_client.infrastructure import AssemblyAIClient
from assemblyai_client.infrastructure.assemblyai_client import JSON_CONTENT_TYPE
from assemblyai_client.infrastructure.interfaces import TranscriptionClient

logger = logging.getLogger(__name__)


def build_http_client(
    config: ClientConfig, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """
    Creates the httpx client shared by every call of one AssemblyAI client.

    The API key is sent verbatim in the Authorization header; the service
    does not use a "Bearer" scheme.
    """
    return httpx.Client(
        base_url=config.base_url,
        timeout=config.timeout,
        follow_redirects=True,
        transport=transport,
        headers={
            "Accept": JSON_CONTENT_TYPE,
            "Authorization": config.api_key,
        },
    )


def new_client(
    api_key: str,
    base_url: str = BASE_URL_V2,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> TranscriptionClient:
    """Returns a client for the given API key, defaulting to the v2 endpoint."""
    config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
    return get_client(config)


def get_client(config: ClientConfig | None = None) -> TranscriptionClient:
    """Returns a configured client, reading the environment when no config is given."""
    config = config or load_config()
    logger.info(
        "AssemblyAI client configured",
        extra={"base_url": config.base_url, "timeout": config.timeout},
    )
    return AssemblyAIClient(build_http_client(config))
