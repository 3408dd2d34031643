"""Input and batch result models for the extraction service."""

import base64
from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .profile import ProfileRecord

DEFAULT_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageUpload:
    """One uploaded screenshot."""

    file_name: str
    content: bytes
    mime_type: str = DEFAULT_MIME_TYPE

    def to_data_url(self) -> str:
        """Encode the image as a base64 ``data:`` URL for the vision model."""
        mime_type = self.mime_type if self.mime_type and self.mime_type.startswith("image/") else DEFAULT_MIME_TYPE
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{mime_type};base64,{encoded}"


class ExtractionFailure(BaseModel):
    """An image that produced no profile record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_name: str
    reason: str  # parse_error | transport_error | empty_image | cancelled
    detail: str = ""


@dataclass
class BatchResult:
    """Profiles extracted from one batch, plus the images that were dropped."""

    profiles: List[ProfileRecord] = field(default_factory=list)
    failures: List[ExtractionFailure] = field(default_factory=list)
