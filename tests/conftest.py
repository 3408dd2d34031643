"""Test configuration and fixtures."""

import os
import sys
import tempfile
from pathlib import Path

# Test configuration; must be in place before profile_ocr.config is imported
TEST_LOG_DIR = tempfile.mkdtemp(prefix="profile_ocr_logs_")
os.environ["LOG_DIR"] = TEST_LOG_DIR
os.environ["DEMO_FALLBACK"] = "false"
os.environ["CSV_QUOTE_FIELDS"] = "false"

# Ensure src/ is importable without an editable install
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest

from profile_ocr.models import ImageUpload, LinkRecord, ProfileRecord, ProfileStatus


@pytest.fixture
def image_factory():
    """Build ``ImageUpload`` objects with placeholder PNG bytes."""

    def _make(file_name: str = "profile.png", content: bytes = b"\x89PNG\r\n\x1a\nfake", mime_type: str = "image/png"):
        return ImageUpload(file_name=file_name, content=content, mime_type=mime_type)

    return _make


@pytest.fixture
def profile_factory():
    """Build completed ``ProfileRecord`` objects."""

    def _make(**overrides):
        fields = {
            "source_file_name": "profile.png",
            "username": "@creator",
            "display_name": "Creator",
            "platform": "Instagram",
            "follower_count_text": "1.2M",
            "bio": "Links below",
            "bio_links": ["https://linktr.ee/creator"],
            "extracted_links": [LinkRecord(url="https://linktr.ee/creator", category="business", title="All Links")],
            "status": ProfileStatus.COMPLETED,
        }
        fields.update(overrides)
        return ProfileRecord(**fields)

    return _make


@pytest.fixture
def completion_json():
    """A well-formed completion for one screenshot."""
    return (
        '{"username": "@bellapoarch", "displayName": "Bella Poarch", "platform": "TikTok", '
        '"followers": "89.2M", "bio": "Singer, Content Creator", '
        '"bioLinks": ["https://bellapoarch.com"], '
        '"extractedLinks": [{"url": "https://bellapoarch.com", "type": "business", "title": "Official Website"}]}'
    )
