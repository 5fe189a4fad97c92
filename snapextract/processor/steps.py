import time
from collections.abc import Callable

from snapextract.logging.logger import Log
from snapextract.patterns.extractor import PatternExtractor
from snapextract.processor.pipeline import PipelineContext, PipelineStep
from snapextract.tagging.tag_inference import derive_tags
from snapextract.transcription.base import BaseTranscriber
from snapextract.transcription.exceptions import TranscriptionTransientError
from snapextract.transcription.prompt_builder import (
    DEFAULT_MAX_REQUIREMENTS_CHARS,
    PromptBuilder,
    PromptOptions,
)


class BuildPromptStep(PipelineStep):
    def __init__(
        self,
        prompt_builder: PromptBuilder,
        max_requirements_chars: int = DEFAULT_MAX_REQUIREMENTS_CHARS,
    ) -> None:
        self._prompt_builder = prompt_builder
        self._max_requirements_chars = max_requirements_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        context.prompt = self._prompt_builder.build(
            PromptOptions(
                user_requirements=context.requirements,
                max_requirements_chars=self._max_requirements_chars,
            )
        )
        return context


class TranscribeStep(PipelineStep):
    """Transcribes the image, retrying transient failures with exponential backoff."""

    def __init__(
        self,
        transcriber: BaseTranscriber,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transcriber = transcriber
        self._max_attempts = max(1, max_attempts)
        self._backoff_seconds = backoff_seconds
        self._sleep = sleep

    def run(self, context: PipelineContext) -> PipelineContext:
        image = context.image
        for attempt in range(1, self._max_attempts + 1):
            try:
                context.text = self._transcriber.transcribe(
                    image.content,
                    context.prompt,
                    mime_type=image.mime_type,
                )
                break
            except TranscriptionTransientError as exc:
                if attempt >= self._max_attempts:
                    Log.error(
                        f"Transcription of {image.filename} failed after {attempt} attempts: {exc}"
                    )
                    raise
                delay = self._backoff_seconds * 2 ** (attempt - 1)
                Log.warning(
                    f"Transcription of {image.filename} failed (attempt {attempt}), "
                    f"retrying in {delay:.1f}s: {exc}"
                )
                self._sleep(delay)
        Log.info(f"Transcribed {image.filename}: {len(context.text)} chars")
        return context


class ExtractPatternsStep(PipelineStep):
    def __init__(self, extractor: PatternExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.result = self._extractor.extract_result(context.text)
        found = sum(len(matches) for matches in context.result.patterns.values())
        Log.info(
            f"Extracted {found} matches in {len(context.result.patterns)} categories "
            f"from {context.image.filename}"
        )
        return context


class DeriveTagsStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None:
            raise ValueError("PipelineContext.result must be set before tag derivation")
        context.tags = derive_tags(context.result)
        Log.debug(f"Derived tags for {context.image.filename}: {sorted(context.tags)}")
        return context
