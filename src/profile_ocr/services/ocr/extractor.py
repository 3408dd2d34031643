"""
Profile extraction from screenshots.

Each image in a batch is sent to the vision model on its own; failures are
isolated per image and never abort the batch.
"""

import asyncio
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Union

from ...config import settings
from ...exceptions import ExtractionParseFailure, InvalidInput, TransportFailure, UnexpectedFailure
from ...logging_config import setup_logging
from ...models import (
    BatchResult,
    ExtractionFailure,
    ImageUpload,
    ParsedProfile,
    ProfileRecord,
    ProfileStatus,
)
from ..llm import VisionLLMService
from .parser import parse_profile_completion
from .prompts import PROFILE_EXTRACTION_PROMPT

logger = setup_logging("profile_extractor")

RevenueEstimator = Callable[[ParsedProfile], Optional[float]]


def build_profile_record(
    image: ImageUpload,
    parsed: ParsedProfile,
    revenue_estimate: Optional[float] = None,
) -> ProfileRecord:
    """Materialize a completed ``ProfileRecord`` from a parsed completion."""
    return ProfileRecord(
        source_file_name=image.file_name,
        username=parsed.username,
        display_name=parsed.display_name,
        platform=parsed.platform,
        follower_count_text=parsed.followers,
        bio=parsed.bio,
        bio_links=list(parsed.bio_links),
        extracted_links=list(parsed.extracted_links),
        revenue_estimate=revenue_estimate,
        status=ProfileStatus.COMPLETED,
        processed_at=datetime.now(timezone.utc),
    )


class ProfileExtractor:
    """Runs a batch of screenshots through the vision model."""

    def __init__(
        self,
        llm: Optional[VisionLLMService] = None,
        max_concurrency: Optional[int] = None,
        revenue_estimator: Optional[RevenueEstimator] = None,
        instruction: str = PROFILE_EXTRACTION_PROMPT,
    ):
        """Initialize the extractor.

        Args:
            llm: Vision model wrapper
            max_concurrency: Maximum number of images in flight at once
            revenue_estimator: Optional callable producing ``revenue_estimate``;
                without one the field is left empty
            instruction: Fixed instruction sent with every image
        """
        self.llm = llm or VisionLLMService()
        self.max_concurrency = max(1, max_concurrency or settings.max_concurrent_requests)
        self.revenue_estimator = revenue_estimator
        self.instruction = instruction

    async def extract(self, images: Sequence[ImageUpload]) -> List[ProfileRecord]:
        """Extract one profile per image; failed images are left out."""
        result = await self.extract_batch(images)
        return result.profiles

    async def extract_batch(
        self,
        images: Sequence[ImageUpload],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> BatchResult:
        """Extract profiles and report the images that were dropped.

        Args:
            images: Uploaded screenshots, in submission order
            cancel_event: When set, images that have not started yet are
                skipped and reported as ``cancelled``

        Returns:
            BatchResult: Profiles in input order plus per-image failures

        Raises:
            InvalidInput: If ``images`` is empty
            UnexpectedFailure: If an image fails for any reason other than
                transport or parsing; no partial results are returned
        """
        if not images:
            raise InvalidInput("No images provided")

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(image: ImageUpload) -> Union[ProfileRecord, ExtractionFailure]:
            async with semaphore:
                if cancel_event is not None and cancel_event.is_set():
                    return ExtractionFailure(file_name=image.file_name, reason="cancelled")
                return await self._extract_one(image)

        tasks = [asyncio.ensure_future(run(image)) for image in images]
        try:
            outcomes = await asyncio.gather(*tasks)
        except Exception as e:
            # Stop the remaining model calls before reporting the batch failure.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise UnexpectedFailure(f"Extraction batch failed: {e}") from e

        result = BatchResult()
        for outcome in outcomes:
            if isinstance(outcome, ProfileRecord):
                result.profiles.append(outcome)
            else:
                result.failures.append(outcome)

        logger.info(
            "Extraction batch finished",
            extra={
                "images": len(images),
                "profiles": len(result.profiles),
                "failures": len(result.failures),
            },
        )
        return result

    async def _extract_one(self, image: ImageUpload) -> Union[ProfileRecord, ExtractionFailure]:
        if not image.content:
            logger.warning("Skipping empty image", extra={"file_name": image.file_name})
            return ExtractionFailure(file_name=image.file_name, reason="empty_image")

        try:
            completion = await self.llm.process_image(self.instruction, image.to_data_url())
            parsed = parse_profile_completion(completion)
        except TransportFailure as e:
            logger.warning(
                "Vision model call failed",
                extra={"file_name": image.file_name, "error": str(e)},
            )
            return ExtractionFailure(file_name=image.file_name, reason="transport_error", detail=str(e))
        except ExtractionParseFailure as e:
            logger.warning(
                "Failed to parse OCR response",
                extra={"file_name": image.file_name, "error": str(e)},
            )
            return ExtractionFailure(file_name=image.file_name, reason="parse_error", detail=str(e))

        revenue = self.revenue_estimator(parsed) if self.revenue_estimator else None
        record = build_profile_record(image, parsed, revenue)
        logger.info(
            "Profile extracted",
            extra={"file_name": image.file_name, "profile_id": record.id, "username": record.username},
        )
        return record
