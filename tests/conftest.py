import pytest

from snapextract.processor.models import UploadedImage

# Smallest valid PNG: 1x1 transparent pixel.
PNG_PIXEL = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d4944415478da63f8ffff3f0005fe02fea7d6a4a10000000049454e44ae426082"
)

INVOICE_TEXT = (
    "Invoice #INV-2024-001 dated 03/15/2024 for $1,250.00. "
    "Contact: jane@example.com or 555-123-4567."
)


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_PIXEL


@pytest.fixture()
def invoice_text() -> str:
    return INVOICE_TEXT


@pytest.fixture()
def uploaded_image() -> UploadedImage:
    return UploadedImage(filename="receipt.png", content=PNG_PIXEL, mime_type="image/png")
