from snapextract.patterns.exceptions import InvalidCategoryError, PatternError
from snapextract.patterns.extractor import PatternExtractor, extract
from snapextract.patterns.matcher import match
from snapextract.patterns.models import Category, ExtractionResult

__all__ = [
    "Category",
    "ExtractionResult",
    "InvalidCategoryError",
    "PatternError",
    "PatternExtractor",
    "extract",
    "match",
]
