from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from snapextract.patterns.exceptions import InvalidCategoryError


class Category(str, Enum):
    """Kinds of structured entities recognised in transcribed text.

    Member order is the extraction order.
    """

    DATE = "date"
    AMOUNT = "amount"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    ADDRESS = "address"
    IDENTIFIER = "identifier"
    URL = "url"
    SOCIAL_MEDIA_HANDLE = "socialMediaHandle"
    PRODUCT_CODE = "productCode"

    @property
    def wire_key(self) -> str:
        """Plural key used in the JSON wire shape, e.g. ``phoneNumbers``."""
        return _WIRE_KEYS[self]

    @classmethod
    def from_name(cls, name: "Category | str") -> "Category":
        """Resolve a category from its value (``phoneNumber``) or wire key.

        Raises:
            InvalidCategoryError: if *name* matches no category.
        """
        if isinstance(name, Category):
            return name
        for category in cls:
            if name in (category.value, category.wire_key):
                return category
        raise InvalidCategoryError(f"Unknown category: {name!r}")


_WIRE_KEYS: dict[Category, str] = {
    Category.DATE: "dates",
    Category.AMOUNT: "amounts",
    Category.EMAIL: "emails",
    Category.PHONE_NUMBER: "phoneNumbers",
    Category.ADDRESS: "addresses",
    Category.IDENTIFIER: "identifiers",
    Category.URL: "urls",
    Category.SOCIAL_MEDIA_HANDLE: "socialMediaHandles",
    Category.PRODUCT_CODE: "productCodes",
}


@dataclass(frozen=True)
class ExtractionResult:
    """Transcribed text plus the sparse map of matches per category."""

    text: str
    patterns: Mapping[Category, tuple[str, ...]] = field(default_factory=dict)

    def has(self, category: Category) -> bool:
        return bool(self.patterns.get(category))
