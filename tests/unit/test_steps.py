from unittest.mock import MagicMock

import pytest

from snapextract.patterns.extractor import PatternExtractor
from snapextract.patterns.models import Category, ExtractionResult
from snapextract.processor.models import UploadedImage
from snapextract.processor.pipeline import PipelineContext
from snapextract.processor.steps import (
    BuildPromptStep,
    DeriveTagsStep,
    ExtractPatternsStep,
    TranscribeStep,
)
from snapextract.transcription.base import BaseTranscriber
from snapextract.transcription.exceptions import (
    TranscriptionHardError,
    TranscriptionTransientError,
)
from snapextract.transcription.prompt_builder import PromptBuilder


def _context(image: UploadedImage, **kwargs: object) -> PipelineContext:
    return PipelineContext(image=image, **kwargs)  # type: ignore[arg-type]


class TestBuildPromptStep:
    def test_without_requirements(self, uploaded_image: UploadedImage) -> None:
        step = BuildPromptStep(PromptBuilder("Default."))
        context = step.run(_context(uploaded_image))
        assert context.prompt == "Default."

    def test_with_truncated_requirements(self, uploaded_image: UploadedImage) -> None:
        step = BuildPromptStep(PromptBuilder("Default."), max_requirements_chars=4)
        context = step.run(_context(uploaded_image, requirements="totals only"))
        assert "tota [truncated]" in context.prompt
        assert context.prompt.endswith("Default.")


class TestTranscribeStep:
    def test_stores_text(self, uploaded_image: UploadedImage) -> None:
        transcriber = MagicMock(spec=BaseTranscriber)
        transcriber.transcribe.return_value = "hello"
        step = TranscribeStep(transcriber)
        context = step.run(_context(uploaded_image, prompt="p"))

        assert context.text == "hello"
        transcriber.transcribe.assert_called_once_with(
            uploaded_image.content, "p", mime_type="image/png"
        )

    def test_retries_transient_errors_with_backoff(self, uploaded_image: UploadedImage) -> None:
        transcriber = MagicMock(spec=BaseTranscriber)
        transcriber.transcribe.side_effect = [
            TranscriptionTransientError("timeout"),
            TranscriptionTransientError("timeout"),
            "finally",
        ]
        sleep = MagicMock()
        step = TranscribeStep(transcriber, max_attempts=3, backoff_seconds=0.5, sleep=sleep)
        context = step.run(_context(uploaded_image))

        assert context.text == "finally"
        assert transcriber.transcribe.call_count == 3
        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]

    def test_gives_up_after_max_attempts(self, uploaded_image: UploadedImage) -> None:
        transcriber = MagicMock(spec=BaseTranscriber)
        transcriber.transcribe.side_effect = TranscriptionTransientError("down")
        sleep = MagicMock()
        step = TranscribeStep(transcriber, max_attempts=2, sleep=sleep)

        with pytest.raises(TranscriptionTransientError, match="down"):
            step.run(_context(uploaded_image))
        assert transcriber.transcribe.call_count == 2
        assert sleep.call_count == 1

    def test_hard_errors_are_not_retried(self, uploaded_image: UploadedImage) -> None:
        transcriber = MagicMock(spec=BaseTranscriber)
        transcriber.transcribe.side_effect = TranscriptionHardError("bad image")
        sleep = MagicMock()
        step = TranscribeStep(transcriber, max_attempts=3, sleep=sleep)

        with pytest.raises(TranscriptionHardError):
            step.run(_context(uploaded_image))
        assert transcriber.transcribe.call_count == 1
        sleep.assert_not_called()


class TestExtractPatternsStep:
    def test_sets_result(self, uploaded_image: UploadedImage, invoice_text: str) -> None:
        step = ExtractPatternsStep(PatternExtractor())
        context = step.run(_context(uploaded_image, text=invoice_text))

        assert context.result is not None
        assert context.result.text == invoice_text
        assert context.result.patterns[Category.EMAIL] == ("jane@example.com",)

    def test_empty_text_gives_empty_patterns(self, uploaded_image: UploadedImage) -> None:
        context = ExtractPatternsStep(PatternExtractor()).run(_context(uploaded_image))
        assert context.result == ExtractionResult(text="", patterns={})


class TestDeriveTagsStep:
    def test_sets_tags(self, uploaded_image: UploadedImage) -> None:
        result = ExtractionResult(text="Receipt", patterns={Category.DATE: ("2024-01-01",)})
        context = DeriveTagsStep().run(_context(uploaded_image, result=result))
        assert context.tags == {"receipt", "date"}

    def test_requires_result(self, uploaded_image: UploadedImage) -> None:
        with pytest.raises(ValueError, match="result must be set"):
            DeriveTagsStep().run(_context(uploaded_image))
