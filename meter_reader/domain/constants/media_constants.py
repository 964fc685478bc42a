"""
Shared constants for meter image uploads.

Used by the image store, the OCR client and the image download endpoint.
"""

# Pillow format name -> (file extension, mime type)
IMAGE_FORMATS = {
    "JPEG": (".jpg", "image/jpeg"),
    "PNG": (".png", "image/png"),
    "WEBP": (".webp", "image/webp"),
    "GIF": (".gif", "image/gif"),
}

# Payloads Pillow cannot identify are stored and sent to the OCR model as JPEG
DEFAULT_IMAGE_FORMAT = "JPEG"

ALLOWED_IMAGE_EXTENSIONS = frozenset(ext for ext, _ in IMAGE_FORMATS.values()) | {".jpeg"}

# URL path under which stored images are served
IMAGES_URL_PREFIX = "/images"
