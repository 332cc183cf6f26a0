"""
HTTP client for the external image tagging service.

The service has no health endpoint and no retry contract, so this client:
1. Probes availability with a cheap OPTIONS request (5s bound)
2. Uploads the image as multipart form data (30s bound)
3. Decodes the label list from either the `tags` or `english` field

Failures are raised internally as typed exceptions and handed to callers as
explicit ExtractFailure values; nothing escapes `probe` or `extract_labels`.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import httpx
from pydantic import StrictStr, TypeAdapter, ValidationError

from app.config import settings
from app.services.ingredient_schemas import (
    ExtractFailure,
    ExtractOk,
    ExtractOutcome,
    FailureKind,
    RecognitionPayload,
)


logger = logging.getLogger(__name__)

_LABEL_LIST = TypeAdapter(list[StrictStr])

# Checked in order; the first field holding a valid list of strings wins
LABEL_FIELDS = ("tags", "english")


def decode_recognition_payload(body: Any) -> RecognitionPayload:
    """
    Decode the service response body into a label list.

    Raises:
        MalformedResponseError: Body is not an object, or neither label field
            holds a list of strings
    """
    if not isinstance(body, dict):
        raise MalformedResponseError(
            f"Expected JSON object, got {type(body).__name__}"
        )

    for field in LABEL_FIELDS:
        if field not in body:
            continue
        try:
            labels = _LABEL_LIST.validate_python(body[field])
        except ValidationError as e:
            logger.debug("Ignoring invalid '%s' field: %s", field, e)
            continue
        return RecognitionPayload(source=field, labels=tuple(labels))

    raise MalformedResponseError(
        f"Response has no usable label field (keys: {sorted(body)})"
    )


class VisionClient:
    """Availability probe and label extraction against the tagging service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        probe_timeout: Optional[float] = None,
        extract_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.recognize_api_url).rstrip("/")
        self.probe_timeout = (
            settings.vision_probe_timeout if probe_timeout is None else probe_timeout
        )
        self.extract_timeout = (
            settings.vision_extract_timeout if extract_timeout is None else extract_timeout
        )
        self.transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout, transport=self.transport)

    # =========================================================================
    # AVAILABILITY PROBE
    # =========================================================================

    async def probe(self) -> bool:
        """
        Check whether the tagging service is reachable.

        Any status below 500 counts as healthy (the root path usually answers
        OPTIONS with 405). Timeouts, transport errors and 5xx are unhealthy.

        Returns:
            True if the service looks usable, False otherwise (never raises)
        """
        try:
            response = await asyncio.wait_for(
                self._options(), timeout=self.probe_timeout
            )
        except asyncio.CancelledError:
            logger.warning("Vision service probe cancelled")
            return False
        except Exception as e:
            logger.warning("Vision service probe failed: %r", e)
            return False

        if response.status_code >= 500:
            logger.warning(
                "Vision service probe returned %d", response.status_code
            )
            return False
        return True

    async def _options(self) -> httpx.Response:
        async with self._client(self.probe_timeout) as client:
            return await client.options(f"{self.base_url}/")

    # =========================================================================
    # LABEL EXTRACTION
    # =========================================================================

    async def extract_labels(self, image_path: str) -> ExtractOutcome:
        """
        Upload an image and return the service's ranked label list.

        Args:
            image_path: Path to an image already saved on local storage

        Returns:
            ExtractOk(labels) on success (labels may be empty), or
            ExtractFailure(kind, detail) when the service cannot be used
        """
        try:
            labels = await self._extract(image_path)
        except RecognitionError as e:
            logger.warning("Label extraction failed (%s): %s", e.kind.value, e)
            return ExtractFailure(kind=e.kind, detail=str(e))

        return ExtractOk(labels=labels)

    async def _extract(self, image_path: str) -> Tuple[str, ...]:
        if not await self.probe():
            raise ServiceUnavailableError("Vision service failed availability probe")

        try:
            response = await asyncio.wait_for(
                self._upload(image_path), timeout=self.extract_timeout
            )
        except asyncio.TimeoutError as e:
            raise UpstreamError(
                f"Vision service timed out after {self.extract_timeout}s"
            ) from e
        except asyncio.CancelledError as e:
            raise UpstreamError("Label extraction cancelled") from e
        except (httpx.HTTPError, OSError) as e:
            raise UpstreamError(f"Vision service request failed: {e!r}") from e

        if not response.is_success:
            raise UpstreamError(f"Vision service error: {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError("Vision service returned invalid JSON") from e

        payload = decode_recognition_payload(body)
        # Blank labels keep their slot; rank is the index in the upstream list
        labels = payload.labels

        logger.info(
            "Vision service returned %d label(s) via '%s'",
            len(labels),
            payload.source,
        )
        return labels

    async def _upload(self, image_path: str) -> httpx.Response:
        path = Path(image_path)
        content = await asyncio.to_thread(path.read_bytes)
        files = {"file": (path.name, content, self._get_media_type(path))}
        async with self._client(self.extract_timeout) as client:
            return await client.post(f"{self.base_url}/", files=files)

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    def _get_media_type(self, image_path: Path) -> str:
        """Determine media type from file extension."""
        media_types = {
            ".jpg": "image/jpeg",
            ".jpeg": "image/jpeg",
            ".png": "image/png",
            ".gif": "image/gif",
            ".webp": "image/webp",
        }
        return media_types.get(image_path.suffix.lower(), "image/jpeg")


# =============================================================================
# CUSTOM EXCEPTIONS
# =============================================================================


class RecognitionError(Exception):
    """Base class for vision service failures."""

    kind: FailureKind


class ServiceUnavailableError(RecognitionError):
    """Vision service failed the availability probe."""

    kind = FailureKind.SERVICE_UNAVAILABLE


class UpstreamError(RecognitionError):
    """Non-2xx response, transport error, timeout or cancellation."""

    kind = FailureKind.UPSTREAM_ERROR


class MalformedResponseError(RecognitionError):
    """Response arrived but carries no usable label list."""

    kind = FailureKind.MALFORMED_RESPONSE
