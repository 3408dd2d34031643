"""
Data models and schemas for the profile OCR pipeline.
"""

from .extraction import ParsedProfile
from .profile import LinkCategory, LinkRecord, ProfileRecord, ProfileStatus
from .upload import DEFAULT_MIME_TYPE, BatchResult, ExtractionFailure, ImageUpload

__all__ = [
    "DEFAULT_MIME_TYPE",
    "BatchResult",
    "ExtractionFailure",
    "ImageUpload",
    "LinkCategory",
    "LinkRecord",
    "ParsedProfile",
    "ProfileRecord",
    "ProfileStatus",
]
