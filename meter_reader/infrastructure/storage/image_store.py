"""Local filesystem storage for meter photographs."""
import asyncio
import logging
import uuid
from pathlib import Path
from typing import Optional, Union

from ...domain.constants.media_constants import ALLOWED_IMAGE_EXTENSIONS, IMAGES_URL_PREFIX
from ...domain.exceptions import ErrorKind, MeasureError
from ...utils.image_utils import decode_image, detect_image_format

logger = logging.getLogger(__name__)


class LocalImageStore:
    """
    Stores decoded images under a root directory.

    The reference handed back by save() is the generated file name; it is what
    Measure.image_path holds and what url_for() and resolve() accept.
    """

    def __init__(self, storage_dir: Union[str, Path], public_base_url: str = "") -> None:
        self.storage_dir = Path(storage_dir)
        self.public_base_url = public_base_url.rstrip("/")

    async def save(self, image_base64: str) -> str:
        """
        Decode and write an image under a fresh file name.

        Returns:
            File name of the stored image

        Raises:
            MeasureError: INVALID_DATA if the payload cannot be decoded,
                SERVER_ERROR if the file cannot be written
        """
        try:
            data = decode_image(image_base64)
        except ValueError as exc:
            raise MeasureError(ErrorKind.INVALID_DATA, "Invalid base64 image") from exc

        extension, _ = detect_image_format(data)
        file_name = f"{uuid.uuid4().hex}{extension}"
        target = self.storage_dir / file_name

        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as exc:
            logger.error(f"Failed to write image {target}: {exc}", exc_info=True)
            raise MeasureError(ErrorKind.SERVER_ERROR, "Failed to store image") from exc

        logger.debug(f"Stored image {file_name} ({len(data)} bytes)")
        return file_name

    def _write(self, target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    async def delete(self, reference: str) -> None:
        """Remove a stored image; failures are logged, not raised."""
        path = self.resolve(reference)
        if path is None:
            return
        try:
            await asyncio.to_thread(path.unlink, True)
        except OSError as exc:
            logger.warning(f"Could not delete image {path}: {exc}")

    def url_for(self, reference: str) -> str:
        """Public URL of a stored image."""
        return f"{self.public_base_url}{IMAGES_URL_PREFIX}/{Path(reference).name}"

    def resolve(self, file_name: str) -> Optional[Path]:
        """
        Path of a stored image, or None when the name is unsafe, not an image,
        or does not exist under the storage root.
        """
        if not file_name or Path(file_name).name != file_name:
            return None
        if Path(file_name).suffix.lower() not in ALLOWED_IMAGE_EXTENSIONS:
            return None

        base_dir = self.storage_dir.resolve()
        resolved = (base_dir / file_name).resolve()
        if resolved.parent != base_dir:
            return None
        if not resolved.is_file():
            return None
        return resolved
