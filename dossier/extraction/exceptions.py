class ExtractionError(Exception):
    """Raised when document extraction fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when the extracted payload does not match any document shape."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
