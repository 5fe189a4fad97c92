"""Runs every category matcher over a transcription."""

from collections.abc import Mapping

from snapextract.patterns.matcher import match
from snapextract.patterns.models import Category, ExtractionResult
from snapextract.patterns.rules import DEFAULT_RULES, Rule


class PatternExtractor:
    """Builds the sparse category -> matches map for a text."""

    def __init__(self, rules: Mapping[Category, Rule] | None = None) -> None:
        self._rules = rules if rules is not None else DEFAULT_RULES

    def extract(self, text: str) -> dict[Category, tuple[str, ...]]:
        """Match all categories in enum order, omitting the empty ones."""
        patterns: dict[Category, tuple[str, ...]] = {}
        for category in Category:
            matches = match(text, category, self._rules)
            if matches:
                patterns[category] = matches
        return patterns

    def extract_result(self, text: str) -> ExtractionResult:
        return ExtractionResult(text=text, patterns=self.extract(text))


_default_extractor = PatternExtractor()


def extract(text: str) -> dict[Category, tuple[str, ...]]:
    """Extract with the default rule registry."""
    return _default_extractor.extract(text)
