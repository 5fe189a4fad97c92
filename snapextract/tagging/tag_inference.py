"""Derives organizational tags from an extraction result.

All rules live in ``TAG_RULES``; each pairs a label with a condition on the
result. Keyword checks are case-insensitive substring tests on the text.
"""

from collections.abc import Callable
from dataclasses import dataclass

from snapextract.patterns.models import Category, ExtractionResult


@dataclass(frozen=True)
class TagRule:
    label: str
    condition: Callable[[ExtractionResult], bool]


def _keyword(word: str) -> Callable[[ExtractionResult], bool]:
    def condition(result: ExtractionResult) -> bool:
        return word in result.text.lower()

    return condition


def _present(*categories: Category) -> Callable[[ExtractionResult], bool]:
    def condition(result: ExtractionResult) -> bool:
        return all(result.has(category) for category in categories)

    return condition


CATEGORY_LABELS: dict[Category, str] = {
    Category.DATE: "date",
    Category.AMOUNT: "financial",
    Category.EMAIL: "email",
    Category.PHONE_NUMBER: "phone",
    Category.ADDRESS: "address",
    Category.IDENTIFIER: "reference",
    Category.URL: "website",
    Category.SOCIAL_MEDIA_HANDLE: "social",
    Category.PRODUCT_CODE: "product",
}

TAG_RULES: tuple[TagRule, ...] = (
    TagRule("invoice", _keyword("invoice")),
    TagRule("receipt", _keyword("receipt")),
    TagRule("contract", _keyword("contract")),
    TagRule("contact", _keyword("business card")),
    *(TagRule(label, _present(category)) for category, label in CATEGORY_LABELS.items()),
    TagRule("transaction", _present(Category.AMOUNT, Category.DATE)),
    TagRule("contact", _present(Category.EMAIL, Category.PHONE_NUMBER)),
    TagRule("order", _present(Category.PRODUCT_CODE, Category.AMOUNT)),
)


def derive_tags(result: ExtractionResult) -> set[str]:
    """Return a fresh set of tags for *result*; callers may mutate it."""
    return {rule.label for rule in TAG_RULES if rule.condition(result)}
