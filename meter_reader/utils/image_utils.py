"""Helpers for base64 meter images."""
import base64
import binascii
import re
from io import BytesIO
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from ..domain.constants.media_constants import DEFAULT_IMAGE_FORMAT, IMAGE_FORMATS

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,")


def strip_data_url_prefix(image_base64: str) -> str:
    """Remove a leading "data:image/<fmt>;base64," if present."""
    return _DATA_URL_PREFIX.sub("", image_base64, count=1)


def decode_image(image_base64: str) -> bytes:
    """
    Strictly decode a base64 image payload.

    Raises:
        ValueError: if the payload is not valid base64 or decodes to nothing
    """
    payload = strip_data_url_prefix(image_base64 or "")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Image payload is not valid base64") from exc
    if not data:
        raise ValueError("Image payload is empty")
    return data


def detect_image_format(data: bytes) -> Tuple[str, str]:
    """
    Identify image bytes with Pillow.

    Returns:
        (file extension, mime type); JPEG when the format is unknown
    """
    try:
        with Image.open(BytesIO(data)) as image:
            image_format = image.format
    except (UnidentifiedImageError, OSError):
        image_format = None

    return IMAGE_FORMATS.get(image_format or DEFAULT_IMAGE_FORMAT, IMAGE_FORMATS[DEFAULT_IMAGE_FORMAT])
