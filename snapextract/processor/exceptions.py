class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class NoImagesProvidedError(ProcessorError):
    """Raised when a batch contains no images."""


class BatchTooLargeError(ProcessorError):
    """Raised when a batch holds more images than allowed."""


class UnsupportedImageTypeError(ProcessorError):
    """Raised when a file is not a supported image type."""


class ImageTooLargeError(ProcessorError):
    """Raised when an image exceeds the upload size limit."""
