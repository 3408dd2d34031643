from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .profile import LinkRecord


class ParsedProfile(BaseModel):
    """Schema the vision model is asked to return for one screenshot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    username: str = ""
    display_name: str = ""
    platform: str = ""
    followers: str = ""
    bio: str = ""
    bio_links: List[str] = Field(default_factory=list)
    extracted_links: List[LinkRecord] = Field(default_factory=list)

    @field_validator("username", "display_name", "platform", "followers", "bio", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # Models answer null for fields they cannot see and numbers for counts.
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("bio_links", mode="before")
    @classmethod
    def _coerce_bio_links(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [link for link in value if link is not None]
        return value

    @field_validator("extracted_links", mode="before")
    @classmethod
    def _coerce_links(cls, value: Any) -> Any:
        if value is None:
            return []
        return value
