"""CSV and JSON export of processed extractions."""

import csv
import io
import json

from snapextract.patterns.models import Category
from snapextract.processor.models import ImageExtraction
from snapextract.processor.result_serializer import ResultSerializer

_MATCH_SEPARATOR = ", "

# CSV column per category, in Category order.
CATEGORY_COLUMNS: dict[Category, str] = {
    Category.DATE: "dates",
    Category.AMOUNT: "amounts",
    Category.EMAIL: "emails",
    Category.PHONE_NUMBER: "phone_numbers",
    Category.ADDRESS: "addresses",
    Category.IDENTIFIER: "identifiers",
    Category.URL: "urls",
    Category.SOCIAL_MEDIA_HANDLE: "social_media_handles",
    Category.PRODUCT_CODE: "product_codes",
}

CSV_FIELDS: list[str] = [
    "filename",
    "requirements",
    "extracted_text",
    *CATEGORY_COLUMNS.values(),
    "tags",
]


class Exporter:
    """Flattens extractions into CSV rows or the JSON wire array."""

    def __init__(self, serializer: ResultSerializer | None = None) -> None:
        self._serializer = serializer if serializer is not None else ResultSerializer()

    def to_rows(self, extractions: list[ImageExtraction]) -> list[dict[str, str]]:
        return [self._row(extraction) for extraction in extractions]

    def to_csv(self, extractions: list[ImageExtraction]) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS, lineterminator="\n")
        writer.writeheader()
        writer.writerows(self.to_rows(extractions))
        return buffer.getvalue()

    def to_json(self, extractions: list[ImageExtraction], indent: int | None = 2) -> str:
        return json.dumps(
            self._serializer.serialize_batch(extractions),
            indent=indent,
            ensure_ascii=False,
        )

    def _row(self, extraction: ImageExtraction) -> dict[str, str]:
        patterns = extraction.result.patterns
        row = {
            "filename": extraction.filename,
            "requirements": extraction.requirements or "",
            "extracted_text": extraction.result.text,
        }
        for category, column in CATEGORY_COLUMNS.items():
            row[column] = _MATCH_SEPARATOR.join(patterns.get(category, ()))
        row["tags"] = _MATCH_SEPARATOR.join(sorted(extraction.tags))
        return row
