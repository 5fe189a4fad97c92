from snapextract.transcription.base import BaseTranscriber
from snapextract.transcription.factory import TranscriberFactory
from snapextract.transcription.prompt_builder import PromptBuilder, PromptOptions, build_prompt
from snapextract.transcription.transcriber import Transcriber

__all__ = [
    "BaseTranscriber",
    "PromptBuilder",
    "PromptOptions",
    "Transcriber",
    "TranscriberFactory",
    "build_prompt",
]
