from collections.abc import Sequence

from snapextract.config.settings import Settings
from snapextract.logging.logger import Log
from snapextract.patterns.factory import PatternExtractorFactory
from snapextract.processor.exceptions import BatchTooLargeError, NoImagesProvidedError
from snapextract.processor.models import ImageExtraction, UploadedImage
from snapextract.processor.pipeline import PipelineContext, PipelineStep
from snapextract.processor.steps import (
    BuildPromptStep,
    DeriveTagsStep,
    ExtractPatternsStep,
    TranscribeStep,
)
from snapextract.transcription.factory import TranscriberFactory
from snapextract.transcription.prompt_builder import PromptBuilder


class Processor:
    """Orchestrates image processing.

    Pipeline: build prompt -> transcribe -> extract patterns -> derive tags.
    A failing step stops the pipeline, so extraction never runs on a failed
    transcription.
    """

    def __init__(self, steps: list[PipelineStep], max_images_per_batch: int = 10) -> None:
        self._steps = steps
        self._max_images_per_batch = max_images_per_batch

    def process(self, image: UploadedImage, requirements: str | None = None) -> ImageExtraction:
        """Run the pipeline for one image."""
        Log.info(f"Processing {image.filename} ({len(image.content)} bytes)")
        context = PipelineContext(image=image, requirements=requirements)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Processing {image.filename} failed: {exc}")
            raise

        if context.result is None:
            raise ValueError("Pipeline finished without an extraction result")
        return ImageExtraction(
            filename=image.filename,
            result=context.result,
            tags=context.tags,
            requirements=requirements,
        )

    def process_batch(
        self,
        images: Sequence[UploadedImage],
        requirements: str | None = None,
    ) -> list[ImageExtraction]:
        """Process images one after another, sharing the same requirements.

        Raises:
            NoImagesProvidedError: if *images* is empty.
            BatchTooLargeError: if *images* exceeds the batch limit.
        """
        if not images:
            raise NoImagesProvidedError("No image files provided")
        if len(images) > self._max_images_per_batch:
            raise BatchTooLargeError(
                f"{len(images)} images submitted, limit is {self._max_images_per_batch}"
            )
        extractions = [self.process(image, requirements) for image in images]
        Log.info(f"Processed batch of {len(extractions)} images")
        return extractions


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    transcriber = TranscriberFactory.create(settings)
    extractor = PatternExtractorFactory.create(settings)
    steps: list[PipelineStep] = [
        BuildPromptStep(PromptBuilder(), settings.max_requirements_chars),
        TranscribeStep(
            transcriber,
            max_attempts=settings.transcription_max_attempts,
            backoff_seconds=settings.transcription_backoff_seconds,
        ),
        ExtractPatternsStep(extractor),
        DeriveTagsStep(),
    ]
    return Processor(steps=steps, max_images_per_batch=settings.max_images_per_batch)
