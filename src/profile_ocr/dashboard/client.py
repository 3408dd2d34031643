"""
HTTP client the dashboard uses to reach the OCR service.
"""
from typing import List, Optional, Sequence

import requests
from pydantic import ValidationError

from ..config import settings
from ..exceptions import InvalidInput, TransportFailure
from ..logging_config import setup_logging
from ..models import ImageUpload, ProfileRecord

logger = setup_logging("ocr_client")


class OCRClient:
    """Posts screenshots to ``/api/ocr/process`` and reads back profiles."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or settings.ocr_api_url
        self.timeout = timeout or settings.dashboard_request_timeout

    def process_images(self, images: Sequence[ImageUpload]) -> List[ProfileRecord]:
        """
        Send a batch of screenshots for extraction.

        Raises:
            InvalidInput: The service rejected the batch (HTTP 400)
            TransportFailure: The service was unreachable, answered with an
                error status, reported ``success: false`` or
                returned profiles that do not validate
        """
        files = [("images", (image.file_name, image.content, image.mime_type)) for image in images]
        try:
            response = requests.post(self.url, files=files, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("OCR service unreachable", extra={"url": self.url, "error": str(e)})
            raise TransportFailure(f"OCR service unreachable: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.status_code == 400:
            raise InvalidInput(payload.get("error", "Invalid request"))
        if response.status_code != 200 or not payload.get("success"):
            error = payload.get("error") or f"HTTP {response.status_code}"
            logger.error("OCR processing failed", extra={"url": self.url, "error": error})
            raise TransportFailure(f"Processing failed: {error}")

        for failure in payload.get("failures") or []:
            logger.warning("Image dropped by OCR service", extra={"failure": failure})

        try:
            return [ProfileRecord.model_validate(profile) for profile in payload.get("profiles") or []]
        except ValidationError as e:
            logger.error("Malformed OCR response", extra={"url": self.url, "error": str(e)})
            raise TransportFailure(f"Malformed OCR response: {e}") from e
