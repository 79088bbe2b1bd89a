"""Inline images.

Profile photos and admin product images are stored as base64 data URLs
directly in the document, so their size is capped before saving.
"""
from typing import Optional

MAX_IMAGE_BYTES = 5 * 1024 * 1024


def decoded_size(data_url: str) -> int:
    """Approximate byte size of the payload after the "data:...;base64," prefix."""
    payload = data_url.split(",", 1)[-1]
    return len(payload) * 3 // 4


def image_too_large(image: Optional[str], limit: int = MAX_IMAGE_BYTES) -> bool:
    if not image:
        return False
    return decoded_size(image) > limit
