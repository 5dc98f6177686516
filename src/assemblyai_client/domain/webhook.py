"""Payload the service delivers to a transcript's webhook_url."""

import logging

from pydantic import ValidationError

from assemblyai_client.exceptions import ResponseDecodeError

from .models import WireModel

logger = logging.getLogger(__name__)


class WebhookPayload(WireModel):
    """Completion notification for a single transcript."""

    transcript_id: str
    status: str


def parse_webhook(body: bytes | str) -> WebhookPayload:
    """
    Decodes the body of an incoming webhook call.

    Args:
        body: Raw request body received by the caller's HTTP handler.

    Returns:
        The decoded WebhookPayload.

    Raises:
        ResponseDecodeError: If the body is not a valid webhook payload.
    """
    try:
        return WebhookPayload.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Invalid webhook payload", extra={"error": str(e)})
        raise ResponseDecodeError(None, e) from e
