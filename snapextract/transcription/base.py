from abc import ABC, abstractmethod


class BaseTranscriber(ABC):
    """Contract for the image-to-text collaborator."""

    @abstractmethod
    def transcribe(self, image_bytes: bytes, prompt: str, mime_type: str = "image/jpeg") -> str:
        """Transcribe the visible text of an image.

        Args:
            image_bytes: Raw image file content.
            prompt: Fully resolved instruction text.
            mime_type: Image content type used for the data URL.

        Returns:
            The model's plain-text transcription (may be empty).

        Raises:
            TranscriptionTransientError: on failures worth retrying.
            TranscriptionHardError: on failures retrying cannot fix.
        """
