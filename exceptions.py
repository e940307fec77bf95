class ResumeTailorError(Exception):
    """Base class for every error this application raises on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(ResumeTailorError):
    """Raised when a required input (resume text, role, file) is missing."""


class UnsupportedFormatError(ResumeTailorError):
    """Raised when an uploaded file is neither PDF nor DOCX."""


class ExtractionError(ResumeTailorError):
    """Raised when a document cannot be decoded into text."""


class ServiceError(ResumeTailorError):
    """Raised when the LLM provider (or the analysis API) answers with a failure.

    ``message`` carries the provider's own error text so callers can see why.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ResumeTailorError):
    """Raised when a completion cannot be parsed into an analysis result."""
