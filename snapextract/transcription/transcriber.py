"""Vision-model transcription of uploaded images."""

import base64

from snapextract.logging.logger import Log
from snapextract.transcription.base import BaseTranscriber
from snapextract.transcription.client_base import BaseVisionClient
from snapextract.transcription.exceptions import TranscriptionHardError


class Transcriber(BaseTranscriber):
    """Sends one image plus instructions to a vision client and returns its text."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        max_tokens: int = 1000,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens

    def transcribe(self, image_bytes: bytes, prompt: str, mime_type: str = "image/jpeg") -> str:
        if not image_bytes:
            raise TranscriptionHardError("Cannot transcribe an empty image")
        Log.debug(f"Transcription prompt:\n{prompt}")

        raw_response = self._client.create_vision_completion(
            model=self._model,
            prompt=prompt,
            image_data_url=self._to_data_url(image_bytes, mime_type),
            max_tokens=self._max_tokens,
        )
        Log.debug(f"Vision raw response:\n{raw_response}")

        text = self._strip_code_fence(raw_response)
        Log.info(f"Transcription complete: {len(text)} chars")
        return text

    @staticmethod
    def _to_data_url(image_bytes: bytes, mime_type: str) -> str:
        encoded = base64.b64encode(image_bytes).decode("ascii")
        return f"data:{mime_type};base64,{encoded}"

    @staticmethod
    def _strip_code_fence(raw: str) -> str:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()
        return cleaned
