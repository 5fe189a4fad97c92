"""Tests for loading the default transcription instructions."""

from pathlib import Path

import pytest

from snapextract.transcription.exceptions import TranscriptionError
from snapextract.transcription.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert template.startswith("Extract and format all visible text from this image.")
        assert "tables or structured data" in template

    def test_default_template_has_no_surrounding_whitespace(self) -> None:
        template = load_prompt_template()
        assert template == template.strip()

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("  Read the receipt.\n\n")
        assert load_prompt_template(custom) == "Read the receipt."

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(TranscriptionError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))
