"""Abstract interface for transcript API operations."""

from abc import ABC, abstractmethod

from assemblyai_client.domain.models import TranscriptionRequest, TranscriptionResponse


class TranscriptionClient(ABC):
    """Abstract base class for transcription service clients."""

    @abstractmethod
    def start_transcript(
        self, request: TranscriptionRequest, timeout: float | None = None
    ) -> TranscriptionResponse:
        """
        Submits a transcription job.

        Does not wait for the job to finish; the returned status is usually
        ``queued`` or ``processing``.

        Args:
            request: The job configuration.
            timeout: Overrides the client timeout for this call, in seconds.

        Returns:
            The job record as accepted by the service.

        Raises:
            TransportError: If the request could not be sent.
            APIError: If the service rejects the request.
            ResponseDecodeError: If the response body is malformed.
        """

    @abstractmethod
    def get_transcript(
        self, transcript_id: str, timeout: float | None = None
    ) -> TranscriptionResponse:
        """
        Fetches the current state of a transcription job.

        Args:
            transcript_id: Identifier returned by start_transcript.
            timeout: Overrides the client timeout for this call, in seconds.

        Returns:
            The job record, complete once ``is_terminal`` is true.

        Raises:
            TranscriptNotFoundError: If no transcript has this id.
            TransportError: If the request could not be sent.
            APIError: If the service answers with a failing status.
            ResponseDecodeError: If the response body is malformed.
        """

    @abstractmethod
    def upload_file(self, path: str, timeout: float | None = None) -> str:
        """
        Uploads a local audio file.

        Args:
            path: Path of the file to upload.
            timeout: Overrides the client timeout for this call, in seconds.

        Returns:
            The upload URL to use as ``audio_url`` of a TranscriptionRequest.

        Raises:
            FileReadError: If the file cannot be read.
            TransportError: If the request could not be sent.
            APIError: If the service rejects the upload.
            ResponseDecodeError: If the response body is malformed.
        """

    def close(self) -> None:
        """Releases network resources held by the client."""

    def __enter__(self) -> "TranscriptionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
