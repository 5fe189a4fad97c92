import httpx
import openai

from snapextract.transcription.client_base import BaseVisionClient
from snapextract.transcription.exceptions import (
    TranscriptionHardError,
    TranscriptionTransientError,
)

_QUOTA_EXHAUSTED_CODE = "insufficient_quota"


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str,
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {"type": "image_url", "image_url": {"url": image_data_url}},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TranscriptionTransientError(
                f"Vision provider network error: {exc}"
            ) from exc
        except openai.RateLimitError as exc:
            if exc.code == _QUOTA_EXHAUSTED_CODE:
                raise TranscriptionHardError(
                    f"Vision provider quota exhausted: {exc}"
                ) from exc
            raise TranscriptionTransientError(
                f"Vision provider rate limit: {exc}"
            ) from exc
        except openai.InternalServerError as exc:
            raise TranscriptionTransientError(
                f"Vision provider server error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise TranscriptionHardError(
                f"Vision provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise TranscriptionHardError("Vision provider returned no choices")
        return response.choices[0].message.content or ""
