"""Infrastructure interface exports."""

from .transcription_client import TranscriptionClient

__all__ = ["TranscriptionClient"]
