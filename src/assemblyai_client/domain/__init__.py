"""Domain layer exports."""

from .models import (
    AutoHighlight,
    AutoHighlightsResult,
    BoostParam,
    Chapter,
    Entity,
    ErrorResponse,
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
    Word,
)
from .webhook import WebhookPayload, parse_webhook

__all__ = [
    "AutoHighlight",
    "AutoHighlightsResult",
    "BoostParam",
    "Chapter",
    "Entity",
    "ErrorResponse",
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
]
