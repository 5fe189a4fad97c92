from pathlib import Path
from typing import ClassVar

from snapextract.processor.exceptions import ImageTooLargeError, UnsupportedImageTypeError
from snapextract.processor.models import UploadedImage


class ImageLoader:
    """Reads image files from disk and validates type and size."""

    MIME_TYPES: ClassVar[dict[str, str]] = {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".webp": "image/webp",
        ".gif": "image/gif",
    }
    DEFAULT_MAX_BYTES = 5 * 1024 * 1024

    def __init__(self, max_bytes: int | None = None) -> None:
        self._max_bytes = max_bytes if max_bytes is not None else self.DEFAULT_MAX_BYTES

    def load(self, path: Path) -> UploadedImage:
        """Read an image file into an UploadedImage.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedImageTypeError: if the extension is not a known image type.
            ImageTooLargeError: if the file exceeds the size limit.
        """
        mime_type = self.MIME_TYPES.get(path.suffix.lower())
        if mime_type is None:
            raise UnsupportedImageTypeError(
                f"'{path.name}' is not a supported image. "
                f"Choose from: {sorted(self.MIME_TYPES)}"
            )
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        if size > self._max_bytes:
            raise ImageTooLargeError(
                f"'{path.name}' is {size} bytes, limit is {self._max_bytes}"
            )
        return UploadedImage(filename=path.name, content=path.read_bytes(), mime_type=mime_type)
