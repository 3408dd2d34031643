"""Error taxonomy shared by the extraction service and the dashboard."""


class ProfileOCRError(Exception):
    """Base exception for profile OCR errors."""

    pass


class InvalidInput(ProfileOCRError):
    """Raised when the caller violates the request contract (e.g. an empty batch)."""

    pass


class ExtractionParseFailure(ProfileOCRError):
    """Raised when a model completion cannot be read as a structured profile."""

    pass


class TransportFailure(ProfileOCRError):
    """Raised when the vision model or the OCR API cannot be reached or errors out."""

    pass


class UnexpectedFailure(ProfileOCRError):
    """Raised for any other failure while handling a batch."""

    pass
