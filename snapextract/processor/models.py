from dataclasses import dataclass, field

from snapextract.patterns.models import ExtractionResult


@dataclass(frozen=True)
class UploadedImage:
    """An image submitted for extraction."""

    filename: str
    content: bytes
    mime_type: str


@dataclass
class ImageExtraction:
    """Outcome of processing one image.

    ``tags`` starts as the derived tag set and may be edited by the caller.
    """

    filename: str
    result: ExtractionResult
    tags: set[str] = field(default_factory=set)
    requirements: str | None = None
