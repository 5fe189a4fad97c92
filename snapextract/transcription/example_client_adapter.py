"""Offline vision client adapter.

Returns a canned receipt transcription without any network call. Used for
local development, the CLI's ``example`` provider and integration tests.
"""

from typing import ClassVar

from snapextract.transcription.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Adapter that always answers with ``DEFAULT_RESPONSE``."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Acme Supply Co.\n"
        "Receipt No. REF-20931\n"
        "Date: 03/15/2024\n"
        "SKU: WID-4471  Widget (2 pcs)  $24.00\n"
        "Total: $24.00\n"
        "Questions? support@acme-supply.com or 555-123-4567\n"
        "Visit www.acme-supply.com or follow @acmesupply"
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str,
        max_tokens: int,
    ) -> str:
        _ = model, prompt, image_data_url, max_tokens
        return self._response
