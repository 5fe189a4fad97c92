from snapextract.patterns.models import Category, ExtractionResult
from snapextract.processor.models import ImageExtraction


class ResultSerializer:
    """Converts extractions to the JSON-serializable wire shape."""

    def serialize(self, extraction: ImageExtraction) -> dict[str, object]:
        """Return ``{"text", "patterns", "filename"}`` for one image.

        ``patterns`` is keyed by wire key and omits categories without matches.
        """
        return {
            "text": extraction.result.text,
            "patterns": self.patterns_to_dict(extraction.result),
            "filename": extraction.filename,
        }

    def serialize_batch(self, extractions: list[ImageExtraction]) -> list[dict[str, object]]:
        return [self.serialize(extraction) for extraction in extractions]

    def patterns_to_dict(self, result: ExtractionResult) -> dict[str, list[str]]:
        return {
            category.wire_key: list(result.patterns[category])
            for category in Category
            if result.patterns.get(category)
        }
