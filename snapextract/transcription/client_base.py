from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision chat clients."""

    @abstractmethod
    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str,
        max_tokens: int,
    ) -> str:
        """Return the provider's text answer for one prompt + image."""
