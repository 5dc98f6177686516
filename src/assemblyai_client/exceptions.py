"""Custom exceptions for the AssemblyAI client."""


class AssemblyAIError(Exception):
    """Base class for every failure raised by the client."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class FileReadError(AssemblyAIError):
    """Raised when a local audio file cannot be read for upload."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        super().__init__(f"Failed to read audio file '{path}'", cause)


class TransportError(AssemblyAIError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        super().__init__(f"Request to '{url}' failed: {cause}", cause)


class ResponseDecodeError(AssemblyAIError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(self, status_code: int | None, cause: Exception | None = None):
        self.status_code = status_code
        if status_code is None:
            message = f"Unable to decode payload: {cause}"
        else:
            message = f"Unable to decode response, status code: {status_code}"
        super().__init__(message, cause)


class APIError(AssemblyAIError):
    """Raised when the service answers with a status outside [200, 400)."""

    def __init__(self, status_code: int, error: str | None = None):
        self.status_code = status_code
        self.error = error
        if error:
            message = f"AssemblyAI error, status code: {status_code}: {error}"
        else:
            message = f"unknown error, status code: {status_code}"
        super().__init__(message)


class TranscriptNotFoundError(APIError):
    """Raised when the requested transcript does not exist."""

    def __init__(self, status_code: int = 404, error: str | None = None):
        super().__init__(status_code, error)
