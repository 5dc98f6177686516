"""Domain models for the AssemblyAI transcript API."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Immutable JSON model; decoded bodies may carry fields it does not know about."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_json(self) -> str:
        """Serializes only the fields that were explicitly set."""
        return self.model_dump_json(exclude_unset=True, exclude_none=True)

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")


class BoostParam(str, Enum):
    """How strongly the word boost list influences recognition."""

    LOW = "low"
    DEFAULT = "default"
    HIGH = "high"


class IABStatus(str, Enum):
    SUCCESS = "success"
    UNAVAILABLE = "unavailable"


class TranscriptStatus(str, Enum):
    """Lifecycle states the service reports for a transcript."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class TranscriptionRequest(WireModel):
    """
    Configuration of a transcription job.

    Only ``audio_url`` is required. The service treats the presence of a key
    as "the caller configured this", so unset fields never reach the wire.
    Unknown option names are rejected rather than silently dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    audio_url: str = Field(min_length=1)
    acoustic_model: str | None = None
    language_model: str | None = None
    audio_start_from: int | None = Field(default=None, ge=0)
    audio_end_at: int | None = Field(default=None, ge=0)
    dual_channel: bool | None = None
    format_text: bool | None = None
    punctuate: bool | None = None
    speaker_labels: bool | None = None
    auto_highlights: bool | None = None
    iab_categories: bool | None = None
    entity_detection: bool | None = None
    auto_chapters: bool | None = None
    word_boost: list[str] | None = None
    boost_param: BoostParam | None = None
    webhook_url: str | None = None

    def with_options(self, **options: Any) -> "TranscriptionRequest":
        """Returns a copy of the request with the given fields set."""
        return self.model_validate(
            {**self.model_dump(exclude_unset=True), **options}
        )


class Timestamp(WireModel):
    """A time range in milliseconds."""

    start: int
    end: int


class Word(WireModel):
    text: str
    start: int
    end: int
    confidence: float = Field(ge=0.0, le=1.0)
    speaker: str | None = None


class Utterance(WireModel):
    """A single diarized speech turn and the words it contains."""

    speaker: str
    start: int
    end: int
    confidence: float = Field(ge=0.0, le=1.0)
    text: str
    words: list[Word] | None = None


class IABLabel(WireModel):
    label: str
    relevance: float = Field(ge=0.0, le=1.0)


class IABResult(WireModel):
    """A span of text with its ranked topic labels."""

    text: str
    timestamp: Timestamp
    labels: list[IABLabel] | None = None


class IABCategoriesResult(WireModel):
    """
    Topic categorization output.

    ``summary`` has one key per topic label in the taxonomy, so it is kept
    as an open mapping rather than a fixed schema.
    """

    status: IABStatus
    results: list[IABResult] | None = None
    summary: dict[str, Any] | None = None


class AutoHighlight(WireModel):
    text: str
    count: int
    rank: float
    timestamps: list[Timestamp] | None = None


class AutoHighlightsResult(WireModel):
    status: str
    results: list[AutoHighlight] | None = None


class Entity(WireModel):
    entity_type: str
    text: str
    start: int
    end: int


class Chapter(WireModel):
    """An automatically generated chapter, in service order."""

    summary: str
    headline: str
    start: int
    end: int


class TranscriptionResponse(WireModel):
    """
    Transcript job state as reported by the service.

    Result substructures are ``None`` when the matching feature was not
    requested; an empty list means it was requested and found nothing.
    """

    id: str | None = None
    status: str | None = None
    error: str | None = None

    acoustic_model: str | None = None
    language_model: str | None = None
    audio_url: str | None = None
    audio_start_from: int | None = None
    audio_end_at: int | None = None
    dual_channel: bool | None = None
    format_text: bool | None = None
    punctuate: bool | None = None
    speaker_labels: bool | None = None
    auto_highlights: bool | None = None
    iab_categories: bool | None = None
    entity_detection: bool | None = None
    auto_chapters: bool | None = None
    word_boost: list[str] | None = None
    boost_param: str | None = None

    audio_duration: float | None = None
    confidence: float | None = None
    text: str | None = None

    utterances: list[Utterance] | None = None
    words: list[Word] | None = None
    auto_highlights_result: AutoHighlightsResult | None = None
    iab_categories_result: IABCategoriesResult | None = None
    entities: list[Entity] | None = None
    chapters: list[Chapter] | None = None

    webhook_url: str | None = None
    webhook_status_code: int | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == TranscriptStatus.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.status == TranscriptStatus.ERROR.value

    @property
    def is_terminal(self) -> bool:
        """True once the service will no longer change this transcript."""
        return self.is_completed or self.is_failed


class UploadResponse(WireModel):
    upload_url: str


class ErrorResponse(WireModel):
    """Body the service returns alongside a failing status code."""

    error: str | None = None
