from snapextract.config.settings import Settings
from snapextract.patterns.extractor import PatternExtractor
from snapextract.patterns.rules import build_rules


class PatternExtractorFactory:
    """Creates a pattern extractor with the configured identifier thresholds."""

    @classmethod
    def create(cls, settings: Settings) -> PatternExtractor:
        rules = build_rules(
            identifier_min_length=settings.identifier_min_length,
            identifier_upper_ratio=settings.identifier_upper_ratio,
        )
        return PatternExtractor(rules=rules)
