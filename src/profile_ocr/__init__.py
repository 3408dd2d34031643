"""Profile screenshot OCR: vision-model extraction service and operator dashboard."""

__version__ = "0.1.0"
