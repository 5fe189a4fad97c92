"""Recognition rules for every extraction category.

Each rule is a compiled pattern plus optional hooks:

- ``accept`` rejects a raw regex hit that the pattern alone cannot rule out
  (digit counts, character mix).
- ``clean`` trims noise such as trailing sentence punctuation.

All patterns use ``re.ASCII`` so digit and word classes behave the same for
every transcription. Patterns that can start inside a run of token characters
carry a lookbehind guard, so a failed scan is retried only at token starts and
the cost of a category stays linear in the text length.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from snapextract.patterns.models import Category


@dataclass(frozen=True)
class Rule:
    """Recognition rule for one category."""

    pattern: re.Pattern[str]
    accept: Callable[[re.Match[str]], bool] | None = None
    clean: Callable[[str], str] | None = None


DEFAULT_IDENTIFIER_MIN_LENGTH = 6
DEFAULT_IDENTIFIER_UPPER_RATIO = 0.8

CURRENCY_CODES = (
    "USD", "EUR", "GBP", "JPY", "CAD", "AUD", "NZD", "CHF", "CNY", "HKD",
    "SGD", "INR", "MXN", "BRL", "ZAR", "SEK", "NOK", "DKK", "PLN", "MYR",
)
STREET_TYPES = (
    "Street", "St", "Avenue", "Ave", "Road", "Rd", "Boulevard", "Blvd",
    "Lane", "Ln", "Drive", "Dr", "Court", "Ct", "Circle", "Cir", "Way",
    "Place", "Pl", "Square", "Sq",
)
IDENTIFIER_LABELS = ("INV", "REF", "ID", "NO", "PO", "SO")
URL_TLDS = (
    "com", "org", "net", "edu", "gov", "mil", "int", "io", "co", "us", "uk",
    "de", "fr", "es", "it", "nl", "ca", "au", "in", "jp", "cn", "ru", "br",
    "info", "biz", "me", "app", "dev", "ai", "tv", "ly", "gg", "shop", "store",
)
SOCIAL_PLATFORMS = (
    "twitter", "x", "instagram", "facebook", "fb", "linkedin", "tiktok",
    "github", "youtube", "threads", "pinterest", "reddit",
)

_TRAILING_PUNCTUATION = ".,;:!?)]}'\""


def _alternation(words: tuple[str, ...]) -> str:
    return "(?:" + "|".join(words) + ")"


# ----------------------------------------------------------------------
# date
# ----------------------------------------------------------------------

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"

_DATE_RE = re.compile(
    # 2024-03-15, 2024/3/5
    r"(?<![\d.])\d{4}(?P<ysep>[-/.])\d{1,2}(?P=ysep)\d{1,2}(?!\d)"
    # 03/15/2024, 15.03.24
    r"|(?<![\d.])\d{1,2}(?P<dsep>[-/.])\d{1,2}(?P=dsep)(?:\d{4}|\d{2})(?!\d)"
    # Jan 5, 2024 / January 5th 2024
    r"|\b" + _MONTH + r"\.?\s+\d{1,2}" + _ORDINAL + r",?\s+\d{4}(?!\d)"
    # 5 January 2024 / 5th of Jan, 2024
    r"|\b\d{1,2}" + _ORDINAL + r"\s+(?:of\s+)?" + _MONTH + r"\.?,?\s+\d{4}(?!\d)",
    re.IGNORECASE | re.ASCII,
)


# ----------------------------------------------------------------------
# amount
# ----------------------------------------------------------------------

_CODE = _alternation(CURRENCY_CODES)
_SYMBOL = "[$€£¥₹]"
_CURRENCY_WORD = r"(?i:dollars?|euros?|pounds?|yen)"
_INTEGER = r"(?:\d{1,3}(?:,\d{3})+|\d+)"
_NUMBER_END = r"(?!\d)(?![.,]\d)"
_AMOUNT_SUFFIX = r"(?:\s?" + _CODE + r"\b|\s" + _CURRENCY_WORD + r"\b)"
_NOT_IN_NUMBER = r"(?<![\w.,$€£¥₹])"

_AMOUNT_RE = re.compile(
    # $1,250.00 / USD 40 / EUR 12.50 euros
    r"(?:\b" + _CODE + r"\s?" + _SYMBOL + r"?|" + _SYMBOL + r")\s?"
    + _INTEGER + r"(?:\.\d{2})?" + _NUMBER_END + _AMOUNT_SUFFIX + r"?"
    # 1,250 USD / 100 dollars
    + r"|" + _NOT_IN_NUMBER + _INTEGER + r"(?:\.\d{2})?" + _NUMBER_END + _AMOUNT_SUFFIX
    # 1,250.00
    + r"|" + _NOT_IN_NUMBER + _INTEGER + r"\.\d{2}" + _NUMBER_END,
    re.ASCII,
)


# ----------------------------------------------------------------------
# email
# ----------------------------------------------------------------------

_EMAIL_RE = re.compile(
    r"(?<![\w.%+-])[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}\b",
    re.ASCII,
)


# ----------------------------------------------------------------------
# phoneNumber
# ----------------------------------------------------------------------

# A complete North American number ends the match before any trailing groups.
_PHONE_RE = re.compile(
    r"(?<![\w+.,/-])(?:"
    # 555-123-4567, +1 (555) 123 4567
    r"(?:\+1[ .-]?)?(?:\(\d{3}\)[ .-]?|\d{3}[ .-])\d{3}[ .-]\d{4}"
    # +44 20 7946 0958
    r"|(?:\+\d{1,3}[ .-]?)?(?:\(\d{1,4}\)[ .-]?)?\d{2,4}(?:[ .-]\d{2,4}){1,4}"
    r")(?![\w-])",
    re.ASCII,
)
_NUMERIC_DATE_RE = re.compile(r"\d{1,4}([-/.])\d{1,2}\1\d{2,4}", re.ASCII)

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15


def _accept_phone(m: re.Match[str]) -> bool:
    candidate = m.group(0)
    digits = sum(1 for ch in candidate if ch.isdigit())
    if not PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
        return False
    return _NUMERIC_DATE_RE.fullmatch(candidate) is None


# ----------------------------------------------------------------------
# address
# ----------------------------------------------------------------------

# Spaces, or a single line break, between locality words.
_LINE_GAP = r"(?:[ \t]+|[ \t]*\r?\n[ \t]*)"

_ADDRESS_RE = re.compile(
    r"\b\d{1,6}[ \t]+"
    r"(?:[A-Za-z0-9'.-]{1,40}[ \t]+){1,5}?"
    + _alternation(STREET_TYPES)
    + r"\b\.?,?\s+"
    r"(?:[A-Za-z'.-]{1,40},?" + _LINE_GAP + r"){1,5}?"
    r"\d{5}(?:-\d{4})?(?!\d)",
    re.IGNORECASE | re.ASCII,
)


# ----------------------------------------------------------------------
# identifier
# ----------------------------------------------------------------------


def _identifier_pattern(min_length: int) -> re.Pattern[str]:
    return re.compile(
        r"(?P<labeled>\b" + _alternation(IDENTIFIER_LABELS)
        + r"[-#]?\d+(?:[-/][A-Z0-9]+)*\b)"
        r"|(?P<grid>(?<![\d-])\d{4}(?P<gsep>[- ])\d{4}(?P=gsep)\d{4}"
        r"(?:(?P=gsep)\d{4})?(?![\d-]))"
        r"|(?P<bare>\b[A-Za-z0-9]{" + str(min_length) + r",}\b)",
        re.ASCII,
    )


def _upper_or_digit_share(token: str) -> float:
    hits = sum(1 for ch in token if ch.isdigit() or ch.isupper())
    return hits / len(token)


def _identifier_acceptor(upper_ratio: float) -> Callable[[re.Match[str]], bool]:
    def accept(m: re.Match[str]) -> bool:
        if m.lastgroup != "bare":
            return True
        return _upper_or_digit_share(m.group(0)) >= upper_ratio

    return accept


# ----------------------------------------------------------------------
# url
# ----------------------------------------------------------------------

_URL_TAIL = r"(?::\d{1,5})?(?:[/?#][^\s<>\"']*)?"

# Without a scheme the TLD is lowercase and the domain is not followed by "@".
_URL_RE = re.compile(
    r"\b(?i:https?://)(?:www\.)?(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}" + _URL_TAIL
    + r"|(?<![@\w.-])(?:www\.)?(?:[A-Za-z0-9-]+\.)+"
    + _alternation(URL_TLDS) + r"(?![\w@-])" + _URL_TAIL,
    re.ASCII,
)


def _strip_trailing_punctuation(value: str) -> str:
    return value.rstrip(_TRAILING_PUNCTUATION)


# ----------------------------------------------------------------------
# socialMediaHandle
# ----------------------------------------------------------------------

_SOCIAL_RE = re.compile(
    r"(?<![\w@.])@[A-Za-z0-9_]{1,15}(?![\w@])"
    r"|(?<![\w.-])(?:www\.)?" + _alternation(SOCIAL_PLATFORMS)
    + r"\.com/(?:in/|u/|user/|@)?[A-Za-z0-9_.-]{1,40}",
    re.IGNORECASE | re.ASCII,
)


# ----------------------------------------------------------------------
# productCode
# ----------------------------------------------------------------------

_PRODUCT_CODE_RE = re.compile(
    r"(?<![\w-])"
    r"(?:[A-Z]{2,4}-\d{3,7}|\d{12,13}|[A-Z0-9]{4,}-[A-Z0-9]{4,})"
    r"(?![\w-])"
    r"|\b(?i:SKU)(?:[ \t]*[:#-][ \t]*|[ \t]+)"
    r"(?=[A-Za-z0-9-]*\d)[A-Za-z0-9][A-Za-z0-9-]*",
    re.ASCII,
)


def _strip_trailing_dashes(value: str) -> str:
    return value.rstrip("-.")


def build_rules(
    identifier_min_length: int = DEFAULT_IDENTIFIER_MIN_LENGTH,
    identifier_upper_ratio: float = DEFAULT_IDENTIFIER_UPPER_RATIO,
) -> Mapping[Category, Rule]:
    """Build the read-only category -> rule registry.

    Args:
        identifier_min_length: Minimum length of a bare identifier token.
        identifier_upper_ratio: Minimum share of uppercase letters and digits
            a bare identifier token must have.
    """
    if identifier_min_length < 1:
        raise ValueError("identifier_min_length must be at least 1")
    if not 0.0 <= identifier_upper_ratio <= 1.0:
        raise ValueError("identifier_upper_ratio must be between 0 and 1")

    rules: dict[Category, Rule] = {
        Category.DATE: Rule(_DATE_RE),
        Category.AMOUNT: Rule(_AMOUNT_RE),
        Category.EMAIL: Rule(_EMAIL_RE),
        Category.PHONE_NUMBER: Rule(_PHONE_RE, accept=_accept_phone),
        Category.ADDRESS: Rule(_ADDRESS_RE),
        Category.IDENTIFIER: Rule(
            _identifier_pattern(identifier_min_length),
            accept=_identifier_acceptor(identifier_upper_ratio),
        ),
        Category.URL: Rule(_URL_RE, clean=_strip_trailing_punctuation),
        Category.SOCIAL_MEDIA_HANDLE: Rule(_SOCIAL_RE, clean=_strip_trailing_punctuation),
        Category.PRODUCT_CODE: Rule(_PRODUCT_CODE_RE, clean=_strip_trailing_dashes),
    }
    return MappingProxyType(rules)


DEFAULT_RULES: Mapping[Category, Rule] = build_rules()
