"""
Profile OCR Service

This service reads profile screenshots with a vision model and returns structured profiles.
"""

from .extractor import ProfileExtractor
from .main import app

__all__ = ["ProfileExtractor", "app"]
