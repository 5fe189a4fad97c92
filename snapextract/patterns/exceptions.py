class PatternError(Exception):
    """Base exception for pattern extraction errors."""


class InvalidCategoryError(PatternError):
    """Raised when a match is requested for an unknown category."""
