import base64
from unittest.mock import MagicMock

import pytest

from snapextract.transcription.client_base import BaseVisionClient
from snapextract.transcription.exceptions import (
    TranscriptionHardError,
    TranscriptionTransientError,
)
from snapextract.transcription.transcriber import Transcriber


def _make_transcriber(response: str = "text") -> tuple[Transcriber, MagicMock]:
    client = MagicMock(spec=BaseVisionClient)
    client.create_vision_completion.return_value = response
    return Transcriber(client=client, model="vision-model", max_tokens=256), client


class TestTranscriber:
    def test_returns_client_text(self, png_bytes: bytes) -> None:
        transcriber, _ = _make_transcriber("Total: $5.00")
        assert transcriber.transcribe(png_bytes, "prompt", "image/png") == "Total: $5.00"

    def test_sends_base64_data_url(self, png_bytes: bytes) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(png_bytes, "Read it", "image/png")

        expected_url = "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
        client.create_vision_completion.assert_called_once_with(
            model="vision-model",
            prompt="Read it",
            image_data_url=expected_url,
            max_tokens=256,
        )

    def test_defaults_to_jpeg(self, png_bytes: bytes) -> None:
        transcriber, client = _make_transcriber()
        transcriber.transcribe(png_bytes, "p")
        url = client.create_vision_completion.call_args.kwargs["image_data_url"]
        assert url.startswith("data:image/jpeg;base64,")

    def test_strips_code_fence(self, png_bytes: bytes) -> None:
        transcriber, _ = _make_transcriber("```text\nLine one\nLine two\n```")
        assert transcriber.transcribe(png_bytes, "p") == "Line one\nLine two"

    def test_strips_surrounding_whitespace(self, png_bytes: bytes) -> None:
        transcriber, _ = _make_transcriber("\n  hello world \n")
        assert transcriber.transcribe(png_bytes, "p") == "hello world"

    def test_empty_response_is_allowed(self, png_bytes: bytes) -> None:
        transcriber, _ = _make_transcriber("")
        assert transcriber.transcribe(png_bytes, "p") == ""

    def test_empty_image_is_hard_error(self) -> None:
        transcriber, client = _make_transcriber()
        with pytest.raises(TranscriptionHardError, match="empty image"):
            transcriber.transcribe(b"", "p")
        client.create_vision_completion.assert_not_called()

    def test_client_errors_propagate(self, png_bytes: bytes) -> None:
        transcriber, client = _make_transcriber()
        client.create_vision_completion.side_effect = TranscriptionTransientError("down")
        with pytest.raises(TranscriptionTransientError, match="down"):
            transcriber.transcribe(png_bytes, "p")
