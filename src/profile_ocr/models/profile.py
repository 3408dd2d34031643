"""
Profile records produced from screenshot extraction.
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProfileStatus(str, Enum):
    """Lifecycle status of a profile record."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class LinkCategory(str, Enum):
    """Classification of a link found on a profile."""

    SOCIAL = "social"
    MONETIZATION = "monetization"
    BUSINESS = "business"
    CONTACT = "contact"


class LinkRecord(BaseModel):
    """A classified, titled link extracted from a profile."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str
    # The vision model reports the category under "type".
    category: LinkCategory = Field(validation_alias=AliasChoices("category", "type"))
    title: str = ""

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any) -> Any:
        return "" if value is None else value


def new_profile_id() -> str:
    return uuid.uuid4().hex


class ProfileRecord(BaseModel):
    """Structured profile extracted from one screenshot.

    Records are immutable once created; JSON keys are camelCase
    (``sourceFileName``, ``followerCountText`` ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_profile_id)
    source_file_name: str
    username: str = ""
    display_name: str = ""
    platform: str = ""
    follower_count_text: str = ""
    bio: str = ""
    bio_links: List[str] = Field(default_factory=list)
    extracted_links: List[LinkRecord] = Field(default_factory=list)
    generated_page_url: Optional[str] = None
    revenue_estimate: Optional[float] = None
    status: ProfileStatus = ProfileStatus.PENDING
    processed_at: Optional[datetime] = None

    def to_api_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(mode="json", by_alias=True)
