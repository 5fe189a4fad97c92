"""Composes the instruction text sent to the vision model with every image.

User requirements are placed ahead of the default instructions so they get
priority of attention while the baseline transcription instructions still
apply. Requirements longer than ``max_requirements_chars`` are cut to that
length and marked with ``TRUNCATION_MARKER``.
"""

from dataclasses import dataclass
from functools import lru_cache

from snapextract.transcription.prompt_loader import load_prompt_template

DEFAULT_MAX_REQUIREMENTS_CHARS = 2000
TRUNCATION_MARKER = " [truncated]"
REQUIREMENTS_HEADER = "User requirements (follow these first):"


@dataclass(frozen=True)
class PromptOptions:
    user_requirements: str | None = None
    max_requirements_chars: int = DEFAULT_MAX_REQUIREMENTS_CHARS


class PromptBuilder:
    """Resolves PromptOptions into one prompt string."""

    def __init__(self, default_instructions: str | None = None) -> None:
        if default_instructions is None:
            default_instructions = load_prompt_template()
        self._default_instructions = default_instructions

    @property
    def default_instructions(self) -> str:
        return self._default_instructions

    def build(self, options: PromptOptions | None = None) -> str:
        if options is None:
            options = PromptOptions()
        requirements = truncate_requirements(
            options.user_requirements, options.max_requirements_chars
        )
        if not requirements:
            return self._default_instructions
        return f"{REQUIREMENTS_HEADER}\n{requirements}\n\n{self._default_instructions}"


def truncate_requirements(requirements: str | None, max_chars: int) -> str:
    """Strip *requirements* and cut them to *max_chars* characters.

    Returns an empty string for missing or blank input.
    """
    if not requirements:
        return ""
    cleaned = requirements.strip()
    if len(cleaned) <= max_chars:
        return cleaned
    cut = cleaned[:max_chars].rstrip()
    if not cut:
        return ""
    return cut + TRUNCATION_MARKER


@lru_cache(maxsize=1)
def _default_builder() -> PromptBuilder:
    return PromptBuilder()


def build_prompt(options: PromptOptions | None = None) -> str:
    """Build a prompt with the bundled default instructions."""
    return _default_builder().build(options)
