from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from snapextract.patterns.models import ExtractionResult
from snapextract.processor.models import UploadedImage


@dataclass(slots=True)
class PipelineContext:
    image: UploadedImage
    requirements: str | None = None
    prompt: str = ""
    text: str = ""
    result: ExtractionResult | None = None
    tags: set[str] = field(default_factory=set)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
