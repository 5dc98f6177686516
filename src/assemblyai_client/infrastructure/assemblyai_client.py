"""httpx implementation of the TranscriptionClient interface."""

import logging
from pathlib import Path
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from assemblyai_client.domain.models import (
    ErrorResponse,
    TranscriptionRequest,
    TranscriptionResponse,
    UploadResponse,
)
from assemblyai_client.exceptions import (
    APIError,
    FileReadError,
    ResponseDecodeError,
    TranscriptNotFoundError,
    TransportError,
)

from .interfaces import TranscriptionClient

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
UPLOAD_CONTENT_TYPE = "application/octet-stream"

ModelT = TypeVar("ModelT", bound=BaseModel)


class AssemblyAIClient(TranscriptionClient):
    """Talks to the AssemblyAI REST API through a pre-configured httpx client."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def start_transcript(
        self, request: TranscriptionRequest, timeout: float | None = None
    ) -> TranscriptionResponse:
        response = self._send(
            "POST",
            "/transcript",
            content=request.to_bytes(),
            content_type=JSON_CONTENT_TYPE,
            timeout=timeout,
        )
        transcript = self._decode(response, TranscriptionResponse)
        logger.info(
            "Transcript submitted",
            extra={"transcript_id": transcript.id, "status": transcript.status},
        )
        return transcript

    def get_transcript(
        self, transcript_id: str, timeout: float | None = None
    ) -> TranscriptionResponse:
        if not transcript_id:
            raise ValueError("transcript_id must not be empty")

        response = self._send(
            "GET",
            f"/transcript/{quote(transcript_id, safe='')}",
            content_type=JSON_CONTENT_TYPE,
            timeout=timeout,
        )
        transcript = self._decode(response, TranscriptionResponse, not_found=True)
        logger.info(
            "Transcript fetched",
            extra={"transcript_id": transcript_id, "status": transcript.status},
        )
        return transcript

    def upload_file(self, path: str, timeout: float | None = None) -> str:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.exception("Reading audio file failed", extra={"path": str(path)})
            raise FileReadError(str(path), e) from e

        response = self._send(
            "POST",
            "/upload",
            content=data,
            content_type=UPLOAD_CONTENT_TYPE,
            timeout=timeout,
        )
        upload = self._decode(response, UploadResponse)
        logger.info(
            "Audio file uploaded",
            extra={"path": str(path), "size": len(data)},
        )
        return upload.upload_url

    def close(self) -> None:
        self._client.close()

    def _send(
        self,
        method: str,
        path: str,
        content_type: str,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Issues a single request; no retries are attempted."""
        try:
            return self._client.request(
                method,
                path,
                content=content,
                headers={"Content-Type": content_type},
                timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
            )
        except httpx.RequestError as e:
            url = f"{self._client.base_url}{path.lstrip('/')}"
            logger.exception(
                "AssemblyAI request failed", extra={"method": method, "url": url}
            )
            raise TransportError(url, e) from e

    def _decode(
        self, response: httpx.Response, model: type[ModelT], not_found: bool = False
    ) -> ModelT:
        """
        Decodes a response body into ``model``.

        Statuses outside [200, 400) are turned into APIError, carrying the
        ``error`` field of the body when it can be decoded. With ``not_found``
        a 404 means the addressed transcript does not exist.

        Raises:
            TranscriptNotFoundError: If ``not_found`` is set and the status is 404.
            APIError: If the status code signals a failure.
            ResponseDecodeError: If a successful body does not match ``model``.
        """
        status_code = response.status_code
        if status_code < httpx.codes.OK or status_code >= httpx.codes.BAD_REQUEST:
            raise self._api_error(response, not_found)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.exception(
                "Decoding AssemblyAI response failed",
                extra={"status_code": status_code, "model": model.__name__},
            )
            raise ResponseDecodeError(status_code, e) from e

    def _api_error(self, response: httpx.Response, not_found: bool) -> APIError:
        status_code = response.status_code
        try:
            error = ErrorResponse.model_validate_json(response.content).error
        except ValidationError:
            error = None

        logger.warning(
            "AssemblyAI returned an error",
            extra={
                "status_code": status_code,
                "url": str(response.request.url),
                "error": error,
            },
        )

        if not_found and status_code == httpx.codes.NOT_FOUND:
            return TranscriptNotFoundError(status_code, error)
        return APIError(status_code, error)
