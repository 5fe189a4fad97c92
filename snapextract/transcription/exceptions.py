class TranscriptionError(Exception):
    """Raised when an image cannot be transcribed."""


class TranscriptionTransientError(TranscriptionError):
    """Raised on network, timeout, rate-limit or provider-side failures worth retrying."""


class TranscriptionHardError(TranscriptionError):
    """Raised when retrying cannot help: invalid image, bad request, auth or exhausted quota."""
