class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnsupportedFileTypeError(ProcessorError):
    """Raised when an uploaded file is not an image or PDF scan."""


class FileTooLargeError(ProcessorError):
    """Raised when an uploaded file exceeds the configured size limit."""
