from assemblyai_client.config import (
    BASE_URL_V1,
    BASE_URL_V2,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
    load_config,
)
from assemblyai_client.dependencies import get_client, new_client
from assemblyai_client.domain import (
    AutoHighlight,
    AutoHighlightsResult,
    BoostParam,
    Chapter,
    Entity,
    IABCategoriesResult,
    IABLabel,
    IABResult,
    IABStatus,
    Timestamp,
    TranscriptionRequest,
    TranscriptionResponse,
    TranscriptStatus,
    UploadResponse,
    Utterance,
    WebhookPayload,
    Word,
    parse_webhook,
)
from assemblyai_client.exceptions import (
    APIError,
    AssemblyAIError,
    FileReadError,
    ResponseDecodeError,
    TranscriptNotFoundError,
    TransportError,
)
from assemblyai_client.infrastructure import AssemblyAIClient
from assemblyai_client.infrastructure.interfaces import TranscriptionClient
from assemblyai_client.logging import setup_logging

__all__ = [
    "BASE_URL_V1",
    "BASE_URL_V2",
    "DEFAULT_TIMEOUT_SECONDS",
    "ClientConfig",
    "load_config",
    "get_client",
    "new_client",
    "setup_logging",
    "TranscriptionClient",
    "AssemblyAIClient",
    "AutoHighlight",
    "AutoHighlightsResult",
    "BoostParam",
    "Chapter",
    "Entity",
    "IABCategoriesResult",
    "IABLabel",
    "IABResult",
    "IABStatus",
    "Timestamp",
    "TranscriptionRequest",
    "TranscriptionResponse",
    "TranscriptStatus",
    "UploadResponse",
    "Utterance",
    "WebhookPayload",
    "Word",
    "parse_webhook",
    "AssemblyAIError",
    "APIError",
    "FileReadError",
    "ResponseDecodeError",
    "TranscriptNotFoundError",
    "TransportError",
]
