from typing import ClassVar

from snapextract.config.settings import Settings
from snapextract.transcription.base import BaseTranscriber
from snapextract.transcription.example_client_adapter import ExampleClientAdapter
from snapextract.transcription.openai_client_adapter import OpenAIClientAdapter
from snapextract.transcription.transcriber import Transcriber


class TranscriberFactory:
    """Creates the configured transcriber."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTranscriber:
        """Create a transcriber from application settings."""
        provider = settings.transcription_provider.lower()
        if provider == "example":
            return Transcriber(
                client=ExampleClientAdapter(),
                model="example",
                max_tokens=settings.transcription_max_tokens,
            )
        client = OpenAIClientAdapter(
            api_key=settings.transcription_api_key,
            timeout_seconds=settings.transcription_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Transcriber(
            client=client,
            model=settings.transcription_model_name,
            max_tokens=settings.transcription_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = (settings.transcription_base_url or "").strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    "transcription_base_url is required for "
                    "transcription_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown transcription provider '{provider}'. Choose from: {supported}"
        )
