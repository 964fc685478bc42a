"""Google Gemini: read the digits off a meter photograph."""
import logging
import re
from typing import Any, Optional

from google import genai
from google.genai import types

from ...domain.exceptions import ErrorKind, MeasureError
from ...utils.image_utils import decode_image, detect_image_format

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"

METER_READING_PROMPT = (
    "You are a utility meter reading assistant. Extract the numeric value shown on the meter "
    "in the image. Return ONLY the numeric value with no other text or explanation."
)

_NON_DIGITS = re.compile(r"\D")


def parse_meter_value(text: Optional[str]) -> int:
    """
    Keep only the digits of a model answer and parse them.

    Raises:
        ValueError: if the text contains no digits
    """
    digits = _NON_DIGITS.sub("", text or "")
    if not digits:
        raise ValueError(f"No numeric value in OCR response: {text!r}")
    return int(digits)


class GeminiOcrClient:
    """
    Extracts meter readings with a Gemini vision model.

    One request per image; no retries. Every failure becomes an opaque
    SERVER_ERROR so callers never see provider details.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
    ) -> None:
        self.model = model
        self._client = client if client is not None else genai.Client(api_key=api_key)

    async def extract_meter_value(self, image_base64: str) -> int:
        """
        Ask the model for the reading shown in the image.

        Args:
            image_base64: base64 image, optionally as a data URL

        Returns:
            Integer reading

        Raises:
            MeasureError: SERVER_ERROR if the call fails or no digits come back
        """
        try:
            image_bytes = decode_image(image_base64)
            _, mime_type = detect_image_format(image_bytes)

            logger.debug(f"Calling Gemini model {self.model} for meter reading ({mime_type})")
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=[
                    METER_READING_PROMPT,
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                ],
            )
            text = (response.text or "").strip()
            return parse_meter_value(text)
        except Exception as exc:
            logger.error(f"Error extracting meter value from image: {exc}", exc_info=True)
            raise MeasureError(ErrorKind.SERVER_ERROR, "Failed to process image") from exc
