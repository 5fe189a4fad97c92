from unittest.mock import patch

import pytest

from snapextract.config.settings import Settings
from snapextract.transcription.factory import TranscriberFactory
from snapextract.transcription.transcriber import Transcriber

_ADAPTER_PATH = "snapextract.transcription.factory.OpenAIClientAdapter"


class TestTranscriberFactory:
    def test_creates_openai_transcriber(self) -> None:
        settings = Settings(transcription_provider="openai", transcription_api_key="key")
        with patch(_ADAPTER_PATH) as mock_adapter:
            transcriber = TranscriberFactory.create(settings)
        assert isinstance(transcriber, Transcriber)
        mock_adapter.assert_called_once_with(api_key="key", timeout_seconds=30, base_url=None)

    def test_openai_accepts_custom_base_url(self) -> None:
        settings = Settings(
            transcription_provider="openai",
            transcription_base_url="https://proxy.local/v1",
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            TranscriberFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://proxy.local/v1"

    def test_provider_name_is_case_insensitive(self) -> None:
        settings = Settings(transcription_provider="OpenAI")
        with patch(_ADAPTER_PATH):
            assert isinstance(TranscriberFactory.create(settings), Transcriber)

    @pytest.mark.parametrize(
        ("provider", "base_url"),
        [
            ("openrouter", "https://openrouter.ai/api/v1"),
            ("groq", "https://api.groq.com/openai/v1"),
            ("together", "https://api.together.xyz/v1"),
            ("ollama", "http://localhost:11434/v1"),
        ],
    )
    def test_known_compatible_providers(self, provider: str, base_url: str) -> None:
        settings = Settings(transcription_provider=provider)
        with patch(_ADAPTER_PATH) as mock_adapter:
            TranscriberFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == base_url

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(transcription_provider="openai_compatible")
        with pytest.raises(ValueError, match="transcription_base_url is required"):
            TranscriberFactory.create(settings)

    def test_openai_compatible_uses_base_url(self) -> None:
        settings = Settings(
            transcription_provider="openai_compatible",
            transcription_base_url="  http://vllm:8000/v1 ",
        )
        with patch(_ADAPTER_PATH) as mock_adapter:
            TranscriberFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://vllm:8000/v1"

    def test_unknown_provider_raises(self) -> None:
        settings = Settings(transcription_provider="carrier-pigeon")
        with pytest.raises(ValueError, match="Unknown transcription provider"):
            TranscriberFactory.create(settings)

    def test_example_provider_needs_no_network(self, png_bytes: bytes) -> None:
        settings = Settings(transcription_provider="example")
        with patch(_ADAPTER_PATH) as mock_adapter:
            transcriber = TranscriberFactory.create(settings)
        mock_adapter.assert_not_called()
        assert "Acme Supply Co." in transcriber.transcribe(png_bytes, "prompt")
