from collections.abc import Mapping

from snapextract.patterns.exceptions import InvalidCategoryError
from snapextract.patterns.models import Category
from snapextract.patterns.rules import DEFAULT_RULES, Rule


def match(
    text: str,
    category: Category | str,
    rules: Mapping[Category, Rule] = DEFAULT_RULES,
) -> tuple[str, ...]:
    """Return the distinct matches of *category* in *text*.

    Matches are trimmed, never empty, unique by exact string equality and
    ordered by first occurrence in *text*.

    Raises:
        InvalidCategoryError: if *category* is unknown or has no rule.
    """
    resolved = Category.from_name(category)
    rule = rules.get(resolved)
    if rule is None:
        raise InvalidCategoryError(f"No recognition rule for category: {resolved.value}")
    if not text:
        return ()

    found: dict[str, None] = {}
    for m in rule.pattern.finditer(text):
        if rule.accept is not None and not rule.accept(m):
            continue
        value = m.group(0)
        if rule.clean is not None:
            value = rule.clean(value)
        value = value.strip()
        if value and value not in found:
            found[value] = None
    return tuple(found)
